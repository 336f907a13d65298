from termcolor import colored

###############################################################################
# Output prefixes
###############################################################################

CHECKMARK    = '[' + colored("✓", "green") + ']'
CROSSMARK    = '[' + colored("✗", "red") + ']'
QUESTIONMARK = '[' + colored("?", "yellow") + ']'
INFOMARK     = '[' + colored("i", "blue") + ']'

# Continuation lines are indented by the printed width of a prefix
RAW_PREFIX = '[i]'


def _message(prefix: str, *args) -> None:
    msg = '\n'.join(str(arg) for arg in args)
    lines = msg.split('\n')
    print(f"{prefix} {lines[0]}")
    for line in lines[1:]:
        print(f"{' ' * len(RAW_PREFIX)} {line}")

def error(*msg): _message(CROSSMARK, *msg)

def warning(*msg): _message(QUESTIONMARK, *msg)

def info(*msg): _message(INFOMARK, *msg)

def success(*msg): _message(CHECKMARK, *msg)


def verdict(ok: bool, *msg) -> None:
    """Reports `msg` as a success or an error depending on `ok`."""
    if ok: success(*msg)
    else:  error(*msg)

"""Terminal colour codes and the prompt sent to the AI providers."""

_CSI = "\x1b["


def _sgr(code: int) -> str:
    return f"{_CSI}{code}m"


COLOR_RESET = _sgr(0)
COLOR_RED = _sgr(31)
COLOR_GREEN = _sgr(32)
COLOR_ORANGE = _sgr(33)
COLOR_BLUE = _sgr(34)
COLOR_YELLOW = _sgr(93)
COLOR_WHITE = _sgr(97)

COLOR_MAP = dict(
    red=COLOR_RED,
    green=COLOR_GREEN,
    blue=COLOR_BLUE,
    orange=COLOR_ORANGE,
    yellow=COLOR_YELLOW,
    white=COLOR_WHITE,
)

PROMPT_TEMPLATE = """
You are an assistant that lives in the user's terminal.

Answer the query below as a JSON array. Every element of the array is an object shaped like this:

{
  "text": "string, required - the message itself",
  "type": "string, required - 'Note', 'Warning', 'Error' or 'Command'",
  "color": "string, optional - 'red', 'green', 'blue', 'orange', 'yellow' or 'white'",
  "revertCommand": "string, optional - how to undo a Command"
}

Rules:
- Reply with the JSON array alone; split a long answer into several elements where that helps.
- Give revertCommand only for a Command that changes something in a risky way, such as deleting files.
- Give color only where it helps the output.
- Write nothing before or after the array.

The query:

"%s"
"""


def build_prompt(query: str) -> str:
    """Return the provider prompt with ``query`` filled in."""
    return PROMPT_TEMPLATE % (query,)
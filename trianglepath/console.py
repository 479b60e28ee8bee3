from collections import defaultdict

from colorama import Fore, Style


MESSAGE_STYLES = defaultdict(str, {
  "result": Style.BRIGHT + Fore.GREEN,            # The heaviest path
  "stats": Style.DIM,                             # Scan statistics
  "error": Style.BRIGHT + Fore.RED,               # Failed computation
  "usage": Fore.YELLOW,                           # Bad command line
  "prompt": Fore.CYAN,                            # Interactive questions
})


def formatMessage(kind: str, text: str = "") -> str:
  """Formats a message for printing. If text is provided, it will autoreset the style afterwards as well."""
  out = MESSAGE_STYLES[kind]
  if text:
    out += text + Style.RESET_ALL
  return out
def printMessage(kind: str, text: str, **kwargs) -> None:
  print(formatMessage(kind, text), **kwargs)

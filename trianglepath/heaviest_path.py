import signal
import sys

import colorama

from trianglepath.console import formatMessage, printMessage
from trianglepath.constant import (COUNT_FIRST_FLAGS, DEBUG_ONLY, EXIT_INTERRUPTED, EXIT_OK, EXIT_TRIANGLE_ERROR,
                                   EXIT_USAGE, HELP_FLAGS, QUIT_RESPONSES, RESULT_MESSAGE, STATS_FLAGS, STDIN_SOURCE_NAME)
from trianglepath.errors import TriangleError
from trianglepath.triangle_files import iterateTokens, readTriangleFromInput
from trianglepath.triangle_scanner import ScanStats, TriangleScanner, scanTriangleFile

USAGE = """
          Usage: heaviest-path FILE [s] [c]
          FILE                      triangle file, bundled sample name, or - for stdin
          s                         print scan statistics
          c                         count the rows in a first pass, then scan
          """


def printResult(result: int) -> None:
  printMessage("result", RESULT_MESSAGE + str(result))
def printScanStats(stats: ScanStats) -> None:
  name = stats.get("sourceName") or "triangle"
  declared = stats.get("numRowsDeclared")
  declared = "--" if declared is None else declared
  seconds = round(stats.get("endTime") - stats.get("startTime"), 3)
  rows, cells = stats.get("rowsScanned"), stats.get("cellsScanned")
  runningMax, bottomMax = stats.get("maxPathSum"), stats.get("bottomRowMax")

  printMessage("stats", f"""
          Finished scanning {name}:
            {declared                     }\t   Rows counted up front
            {rows                         }\t   Rows scanned
            {cells                        }\t   Cells scanned
            {runningMax                   }\t   Running maximum
            {bottomMax                    }\t   Best on last row
            {seconds                      }\t   Seconds scanning
          """)

def solveFile(sourceName: str, showStats = False, countFirst = False) -> int:
  if sourceName == STDIN_SOURCE_NAME and countFirst:
    printMessage("usage", "Standard input can only be read once. Drop the count option.", file=sys.stderr)
    return EXIT_USAGE
  try:
    result, stats = scanTriangleFile(sourceName, countFirst=countFirst)
  except TriangleError as e:
    printMessage("error", str(e), file=sys.stderr)
    return EXIT_TRIANGLE_ERROR

  printResult(result)
  if showStats:
    printScanStats(stats)
  return EXIT_OK
def solveTypedTriangle(showStats = False) -> int:
  lines = readTriangleFromInput(input, userInteraction=True)
  scanner = TriangleScanner()
  try:
    result = scanner.scan(iterateTokens(lines), "typed triangle")
  except TriangleError as e:
    printMessage("error", str(e), file=sys.stderr)
    return EXIT_TRIANGLE_ERROR

  printResult(result)
  if showStats:
    printScanStats(scanner.getStats())
  return EXIT_OK

def chooseInteraction(args: list[str]) -> int:
  sourceName: str = None
  showStats = False
  countFirst = False

  for arg in args:
    if arg in STATS_FLAGS:
      showStats = True
    elif arg in COUNT_FIRST_FLAGS:
      countFirst = True
    elif arg in HELP_FLAGS:
      print(USAGE)
      return EXIT_OK
    elif sourceName is None:
      sourceName = arg
    else:
      printMessage("usage", f"Unexpected argument: {arg}", file=sys.stderr)
      print(USAGE, file=sys.stderr)
      return EXIT_USAGE

  if sourceName is not None:
    if DEBUG_ONLY: print(f"Scanning {sourceName}. stats={showStats} countFirst={countFirst}")
    return solveFile(sourceName, showStats=showStats, countFirst=countFirst)

  # Request the source
  while True:
    print(formatMessage("prompt", """
          Which triangle?
          NAME                      file name or bundled sample
          i                         type the triangle in
          q                         quit
          """))
    try:
      response = input().strip()
    except EOFError:
      return EXIT_OK
    if not response:
      continue
    elif response in QUIT_RESPONSES:
      return EXIT_OK
    elif response == "i":
      return solveTypedTriangle(showStats=showStats)
    else:
      return solveFile(response, showStats=showStats, countFirst=countFirst)

def signalHandler(signum, frame):
  print(f" Quitting for signal ({signal.strsignal(signum)})")
  sys.exit(EXIT_INTERRUPTED)

# Call signatures:
# heaviest-path FILE
# heaviest-path FILE s c
# heaviest-path               (asks for the file)
def main() -> None:
  colorama.just_fix_windows_console()
  signal.signal(signal.SIGINT, signalHandler)
  sys.exit(chooseInteraction(sys.argv[1:]))

if __name__ == "__main__":
  main()

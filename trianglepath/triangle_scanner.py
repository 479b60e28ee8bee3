import re
from time import time
from typing import Iterable, Iterator, TypedDict

from trianglepath.constant import INTEGER_TOKEN_PATTERN, STDIN_SOURCE_NAME
from trianglepath.errors import EmptyInputError, MalformedNumberError, MissingValueError
from trianglepath.triangle_files import Token, countRows, iterateTokens, openTriangleSource

_INTEGER_TOKEN = re.compile(INTEGER_TOKEN_PATTERN)


class HasTimerStats(TypedDict):
  startTime: float
  endTime: float
class ScanStats(HasTimerStats):
  sourceName: str
  numRowsDeclared: int | None # Only known up front in count-first mode
  rowsScanned: int
  cellsScanned: int
  maxPathSum: int | None      # Running maximum over every cell
  bottomRowMax: int | None    # Best cumulative value on the last row

class TriangleScanner:
  """
  Streaming reducer computing the heaviest top-to-bottom path of a triangle.

  Consumes the triangle as a flat stream of tokens, row `i` being the next `i`
  of them. Only the previous row's cumulative bests are kept while the next
  row is reduced, so memory is two rows regardless of the triangle's height.

  When `numRows` is given the working rows are sized once up front and exactly
  that many rows are read. Otherwise they grow by one cell per row and the scan
  stops when the stream runs out on a row boundary.
  """
  numRows: int | None
  stats: ScanStats

  def __init__(self, numRows: int = None) -> None:
    self.numRows = numRows
    self.stats = None

  def getStats(self) -> ScanStats:
    return self.stats

  def scan(self, tokens: Iterable[Token], sourceName = "") -> int:
    st = self.stats = ScanStats(
      startTime = time(),
      endTime = None,

      sourceName = sourceName,
      numRowsDeclared = self.numRows,
      rowsScanned = 0,
      cellsScanned = 0,
      maxPathSum = None,
      bottomRowMax = None,
    )
    if self.numRows is not None and self.numRows < 1:
      raise EmptyInputError.Create(sourceName)

    tokenStream = iter(tokens)
    capacity = self.numRows or 0
    previousBest = [0] * capacity
    currentBest = [0] * capacity
    runningMax: int = None

    rowIndex = 0
    while self.numRows is None or rowIndex < self.numRows:
      rowIndex += 1
      rowValues = self._readRow(tokenStream, rowIndex, sourceName)
      if rowValues is None:
        break # Stream ended cleanly after the previous row

      if capacity < rowIndex:
        previousBest.append(0)
        currentBest.append(0)
        capacity += 1

      for j, value in enumerate(rowValues):
        # Every value but the top one has one or two parents. Add the heavier one
        if rowIndex > 1:
          if j == 0:                # Only the parent directly above
            value += previousBest[0]
          elif j == rowIndex - 1:   # Only the parent above and to the left
            value += previousBest[j - 1]
          else:
            value += max(previousBest[j - 1], previousBest[j])

        if runningMax is None or value > runningMax:
          runningMax = value
        currentBest[j] = value

      previousBest[0:rowIndex] = currentBest[0:rowIndex]
      st["rowsScanned"] = rowIndex
      st["cellsScanned"] += rowIndex

    if runningMax is None:
      raise EmptyInputError.Create(sourceName)

    st["maxPathSum"] = runningMax
    st["bottomRowMax"] = max(previousBest[0:st["rowsScanned"]])
    st["endTime"] = time()
    return runningMax

  def _readRow(self, tokenStream: Iterator[Token], rowIndex: int, sourceName: str) -> list[int] | None:
    """The next `rowIndex` values, or None if the stream is exhausted before the row starts."""
    values = list()
    lastLine: int = None
    for token in tokenStream:
      lastLine = token.lineNumber
      values.append(self._parseValue(token, rowIndex, sourceName))
      if len(values) == rowIndex:
        return values

    if not values and (self.numRows is None or rowIndex == 1):
      return None
    raise MissingValueError.Create(rowIndex, len(values), sourceName, lineNumber=lastLine)
  @staticmethod
  def _parseValue(token: Token, rowIndex: int, sourceName: str) -> int:
    if not _INTEGER_TOKEN.fullmatch(token.text):
      raise MalformedNumberError.Create(token.text, rowIndex, sourceName, lineNumber=token.lineNumber)
    try:
      return int(token.text)
    except ValueError as e: # Past the interpreter's digit limit for int()
      raise MalformedNumberError.Create(token.text, rowIndex, sourceName, lineNumber=token.lineNumber,
                                        reason="has too many digits") from e


def maxPathSum(sourceName: str, countFirst = False, searchDirs: list[str] = None) -> int:
  return scanTriangleFile(sourceName, countFirst, searchDirs)[0]
def scanTriangleFile(sourceName: str, countFirst = False, searchDirs: list[str] = None) -> tuple[int, ScanStats]:
  """
  Computes the heaviest path of the named triangle source, along with its scan stats.

  By default the source is read once, growing the working rows as it goes.
  With `countFirst` the rows are counted in a separate pass first, one row per
  non-blank line, and the source is then read again for the scan.
  """
  if countFirst and sourceName == STDIN_SOURCE_NAME:
    raise ValueError("Standard input can only be read once, so its rows cannot be counted first")
  numRows = countRows(sourceName, searchDirs) if countFirst else None
  scanner = TriangleScanner(numRows)
  with openTriangleSource(sourceName, searchDirs) as sourceFile:
    result = scanner.scan(iterateTokens(sourceFile), sourceName)
  return (result, scanner.getStats())
def maxPathSumOfRows(rows: Iterable[Iterable[int | str]]) -> int:
  """Same computation for a triangle already in memory. Rows are flattened into one token stream."""
  lines = [" ".join(map(str, row)) for row in rows]
  return TriangleScanner().scan(iterateTokens(lines))

from contextlib import contextmanager
import os
import sys
from typing import Callable, Iterable, Iterator, NamedTuple, TextIO

from trianglepath.constant import DEFAULT_SEARCH_DIRS, STDIN_SOURCE_NAME
from trianglepath.errors import EmptyInputError, SourceUnavailableError


class Token(NamedTuple):
  lineNumber: int
  text: str


# Locate and open sources
def locateTriangleFile(name: str, searchDirs: list[str] = None) -> str:
  """
  Resolves a triangle source name to a readable file path.

  A name that already points at a file is used as is. Otherwise each of the
  `searchDirs` (the bundled sample triangles by default) is tried in order.
  """
  if not name or not name.strip():
    raise SourceUnavailableError.Create(name, "no file name given")
  if os.path.isfile(name):
    return name
  if os.path.isdir(name):
    raise SourceUnavailableError.Create(name, "is a directory")

  if searchDirs is None:
    searchDirs = DEFAULT_SEARCH_DIRS
  for baseDir in searchDirs:
    candidate = os.path.join(baseDir, name)
    if os.path.isfile(candidate):
      return candidate

  raise SourceUnavailableError.Create(name)
@contextmanager
def openTriangleSource(name: str, searchDirs: list[str] = None) -> Iterator[TextIO]:
  if name == STDIN_SOURCE_NAME:
    yield sys.stdin # Not ours to close
    return

  path = locateTriangleFile(name, searchDirs)
  try:
    sourceFile = open(path, "r", encoding="utf-8", errors="replace") # Bad bytes surface as malformed numbers
  except OSError as e:
    raise SourceUnavailableError.Create(name, e.strerror or "could not be read") from e
  with sourceFile:
    yield sourceFile

# Read triangle methods
def countRows(name: str, searchDirs: list[str] = None) -> int:
  """Pre-pass over the source counting its non-blank lines, one row per line."""
  numRows = 0
  with openTriangleSource(name, searchDirs) as sourceFile:
    for line in sourceFile:
      if line.strip():
        numRows += 1

  if numRows == 0:
    raise EmptyInputError.Create(name)
  return numRows
def iterateTokens(lines: Iterable[str]) -> Iterator[Token]:
  for lineNumber, line in enumerate(lines, start=1):
    for text in line.split():
      yield Token(lineNumber, text)
def readTriangleTokens(name: str, searchDirs: list[str] = None) -> Iterator[Token]:
  # The source stays open only while the generator is being consumed
  with openTriangleSource(name, searchDirs) as sourceFile:
    yield from iterateTokens(sourceFile)
def readTriangleFromInput(nextLine: Callable[[], str], userInteraction = False) -> list[str]:
  """
  Reads a triangle one row at a time by invoking `nextLine()` until a blank line.

  Rows are returned as entered; validating them is left to the scanner so that
  typed triangles fail the same way files do.
  """
  if userInteraction: print("Type the rows of the triangle from the top, one row per line.\n" +
                            "  Row N holds N whole numbers separated by spaces.\n" +
                            "  Type a blank line when the triangle is complete.\n")
  lines = []
  while True:
    if userInteraction: print(f"Row {len(lines) + 1}: ")
    try:
      response = nextLine()
    except EOFError:
      break
    if not response or not response.strip():
      break
    lines.append(response.strip())

  return lines

# Save triangle methods
def generateFileContents(rows: list[list[int]]) -> str:
  lines = list()
  for row in rows:
    lines.append(" ".join(map(str, row)))
  lines.append("")
  return "\n".join(lines)
def saveTriangle(fileName: str, rows: list[list[int]]) -> None:
  with open(fileName, "w") as sourceFile:
    sourceFile.write(generateFileContents(rows))

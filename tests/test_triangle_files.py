import io
import os

import pytest

from trianglepath.constant import TRIANGLES_DIR
from trianglepath.errors import EmptyInputError, MalformedNumberError, SourceUnavailableError, TriangleError
from trianglepath.triangle_files import (Token, countRows, generateFileContents, iterateTokens, locateTriangleFile,
                                         openTriangleSource, readTriangleFromInput, readTriangleTokens, saveTriangle)
from trianglepath.triangle_scanner import maxPathSum


# Locating sources
def test_locateExistingPath(writeTriangle):
  path = writeTriangle("1\n")
  assert locateTriangleFile(path) == path
def test_locateBundledSample():
  assert locateTriangleFile("triangle27.txt") == os.path.join(TRIANGLES_DIR, "triangle27.txt")
def test_locateInCustomSearchDirs(tmp_path):
  (tmp_path / "mine.txt").write_text("4\n")
  assert locateTriangleFile("mine.txt", searchDirs=[str(tmp_path)]) == os.path.join(str(tmp_path), "mine.txt")
  assert maxPathSum("mine.txt", searchDirs=[str(tmp_path)]) == 4
def test_customSearchDirsReplaceDefaults(tmp_path):
  with pytest.raises(SourceUnavailableError):
    locateTriangleFile("triangle27.txt", searchDirs=[str(tmp_path)])
@pytest.mark.parametrize("name", ["doesNotExist.txt", "", "   "])
def test_missingSource(name):
  with pytest.raises(SourceUnavailableError) as info:
    maxPathSum(name)
  assert isinstance(info.value, FileNotFoundError)
  assert isinstance(info.value, TriangleError)
def test_directoryIsNotASource(tmp_path):
  with pytest.raises(SourceUnavailableError):
    locateTriangleFile(str(tmp_path))
def test_missingSourceWhenCountingFirst():
  with pytest.raises(SourceUnavailableError):
    maxPathSum("doesNotExist.txt", countFirst=True)

# Scoped handles
def test_sourceClosedAfterUse(writeTriangle):
  with openTriangleSource(writeTriangle("1\n")) as sourceFile:
    assert not sourceFile.closed
  assert sourceFile.closed
def test_sourceClosedOnError(writeTriangle):
  handles = []
  with pytest.raises(RuntimeError):
    with openTriangleSource(writeTriangle("1\n")) as sourceFile:
      handles.append(sourceFile)
      raise RuntimeError("stop")
  assert handles[0].closed
def test_readTokensClosesSourceWhenAbandoned(writeTriangle, monkeypatch):
  path = writeTriangle("1\n2 3\n")
  opened = []
  realOpen = open
  def trackingOpen(*args, **kwargs):
    handle = realOpen(*args, **kwargs)
    opened.append(handle)
    return handle
  monkeypatch.setattr("builtins.open", trackingOpen)

  tokens = readTriangleTokens(path)
  assert next(tokens) == Token(1, "1")
  tokens.close()
  assert opened[0].closed
def test_stdinSource(monkeypatch):
  stdin = io.StringIO("3\n7 4\n2 4 6\n8 5 9 3\n")
  monkeypatch.setattr("sys.stdin", stdin)
  assert maxPathSum("-") == 23
  assert not stdin.closed

# Counting rows
def test_countRows(writeTriangle):
  assert countRows(writeTriangle("3\n7 4\n\n2 4 6\n")) == 3
  assert countRows(writeTriangle("3")) == 1 # No trailing newline
def test_countRowsOfEmptyFile(writeTriangle):
  with pytest.raises(EmptyInputError):
    countRows(writeTriangle(""))
  with pytest.raises(EmptyInputError):
    maxPathSum(writeTriangle("\n\n"), countFirst=True)

# Tokens
def test_iterateTokensKeepsLineNumbers():
  tokens = list(iterateTokens(["3", "", "7\t 4 "]))
  assert tokens == [Token(1, "3"), Token(3, "7"), Token(3, "4")]

# Typed triangles
def test_readTriangleFromInput():
  responses = iter(["1", " 2 3 ", "", "ignored"])
  assert readTriangleFromInput(lambda: next(responses)) == ["1", "2 3"]
def test_readTriangleFromInputUntilEOF():
  responses = iter(["1", "2 3"])
  def nextLine() -> str:
    try:
      return next(responses)
    except StopIteration:
      raise EOFError()
  assert readTriangleFromInput(nextLine) == ["1", "2 3"]

# Saving
def test_generateFileContents():
  assert generateFileContents([[3], [7, 4]]) == "3\n7 4\n"
def test_savedTriangleScansBack(tmp_path):
  path = str(tmp_path / "saved.txt")
  saveTriangle(path, [[5], [9, 6], [4, 6, 8], [0, 7, 1, 5]])
  assert maxPathSum(path) == 27
  assert countRows(path) == 4

# Undecodable bytes
def test_invalidUtf8IsMalformedNumber(tmp_path):
  path = tmp_path / "binary.txt"
  path.write_bytes(b"1\n\xff\xfe 3\n")
  with pytest.raises(MalformedNumberError) as info:
    maxPathSum(str(path))
  assert info.value.rowIndex == 2
  assert info.value.lineNumber == 2
def test_invalidUtf8StillCountsRows(tmp_path):
  path = tmp_path / "binary.txt"
  path.write_bytes(b"1\n\xff\xfe 3\n")
  assert countRows(str(path)) == 2

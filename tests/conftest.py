import itertools

import pytest

from trianglepath.triangle_files import saveTriangle


@pytest.fixture
def writeTriangle(tmp_path):
  """Writes raw text to a triangle file in a temp dir and returns its path."""
  counter = itertools.count()

  def write(contents: str) -> str:
    path = tmp_path / f"triangle{next(counter)}.txt"
    path.write_text(contents)
    return str(path)
  return write

@pytest.fixture
def saveRows(tmp_path):
  counter = itertools.count()

  def save(rows: list[list[int]]) -> str:
    path = str(tmp_path / f"rows{next(counter)}.txt")
    saveTriangle(path, rows)
    return path
  return save

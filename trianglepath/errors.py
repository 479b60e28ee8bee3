class TriangleError(Exception):
  """Base for every failure of a single heaviest-path computation."""
  sourceName: str
  rowIndex: int | None
  lineNumber: int | None
  token: str | None

  def __init__(self, message: str, sourceName = "", rowIndex: int = None, lineNumber: int = None, token: str = None) -> None:
    super().__init__(message)
    self.message = message
    self.sourceName = sourceName
    self.rowIndex = rowIndex
    self.lineNumber = lineNumber
    self.token = token

  def __str__(self) -> str:
    where = list()
    if self.sourceName:
      where.append(str(self.sourceName))
    if self.lineNumber is not None:
      where.append(f"line {self.lineNumber}")
    if self.rowIndex is not None:
      where.append(f"row {self.rowIndex}")

    if not where:
      return self.message
    return f"{self.message} ({', '.join(where)})"


class EmptyInputError(TriangleError, ValueError):
  @staticmethod
  def Create(sourceName = "") -> "EmptyInputError":
    return EmptyInputError("Triangle has no rows", sourceName)

class MissingValueError(TriangleError, ValueError):
  expected: int
  found: int

  @staticmethod
  def Create(rowIndex: int, found: int, sourceName = "", lineNumber: int = None) -> "MissingValueError":
    error = MissingValueError(f"Row {rowIndex} needs {rowIndex} values but only {found} remain",
                              sourceName, rowIndex=rowIndex, lineNumber=lineNumber)
    error.expected = rowIndex
    error.found = found
    return error

class MalformedNumberError(TriangleError, ValueError):
  PREVIEW_CHARS = 20

  @staticmethod
  def Create(token: str, rowIndex: int, sourceName = "", lineNumber: int = None, reason = "is not an integer") -> "MalformedNumberError":
    preview = token if len(token) <= MalformedNumberError.PREVIEW_CHARS else token[:MalformedNumberError.PREVIEW_CHARS] + "..."
    return MalformedNumberError(f"'{preview}' {reason}", sourceName,
                                rowIndex=rowIndex, lineNumber=lineNumber, token=token)

class SourceUnavailableError(TriangleError, FileNotFoundError):
  @staticmethod
  def Create(sourceName: str, reason = "not found") -> "SourceUnavailableError":
    return SourceUnavailableError(f"Triangle source could not be opened: {reason}", sourceName)

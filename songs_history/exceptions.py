"""Fatal error types raised by the changelog pipeline."""


class SongsHistoryError(RuntimeError):
    """Base class for errors that abort a run."""


class RepositoryOpenError(SongsHistoryError):
    """The repository path is missing or is not a git repository."""


class HeadResolutionError(SongsHistoryError):
    """HEAD does not point at a commit."""


class SummaryNotFoundError(SongsHistoryError):
    """The summary document cannot be read from the HEAD snapshot."""


class OutputExistsError(SongsHistoryError):
    """The output file exists and overwriting was not requested."""


class OutputWriteError(SongsHistoryError):
    """The output file cannot be opened or written."""

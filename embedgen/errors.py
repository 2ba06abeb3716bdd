class EmbedError(Exception):
    """Base class for every fatal embedgen error."""


class UsageError(EmbedError):
    """The command line could not be turned into options."""


class MissingRequiredOption(UsageError):
    def __init__(self, option: str, purpose: str):
        super().__init__(f'You must provide {option} for the {purpose}')
        self.option = option


class UnrecognizedOption(UsageError):
    def __init__(self, option: str):
        super().__init__(f"Unrecognized option '{option}'")
        self.option = option


class OptionsAfterPositionalArgs(UsageError):
    def __init__(self, option: str):
        super().__init__(f"You must specify all options before listing files (found '{option}')")
        self.option = option


class NoInputFiles(UsageError):
    def __init__(self):
        super().__init__('No input files given')


class InputFileUnreadable(EmbedError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"Could not open file: '{path}': {reason}")
        self.path = path


class OutputFileUnwritable(EmbedError):
    def __init__(self, kind: str, path: str, reason: str):
        super().__init__(f"Could not open output {kind} file '{path}': {reason}")
        self.kind = kind
        self.path = path

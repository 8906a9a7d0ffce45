from __future__ import annotations

from flagparse.parser.errors import AmbiguousOptionError
from flagparse.parser.errors import BadOptionError
from flagparse.parser.errors import InvalidChoiceError
from flagparse.parser.errors import MissingArgumentError
from flagparse.parser.errors import OptionConflictError
from flagparse.parser.errors import OptionError
from flagparse.parser.errors import OptionValueError
from flagparse.parser.errors import OptParseError
from flagparse.parser.errors import UnexpectedArgumentError
from flagparse.parser.formatters import IndentedHelpFormatter
from flagparse.parser.formatters import TitledHelpFormatter
from flagparse.parser.optparser import SUPPRESS_HELP
from flagparse.parser.optparser import SUPPRESS_USAGE
from flagparse.parser.optparser import Option
from flagparse.parser.optparser import OptionParser
from flagparse.parser.optparser import ParseResult
from flagparse.parser.values import Value
from flagparse.parser.values import Values


__all__ = [
    "SUPPRESS_HELP",
    "SUPPRESS_USAGE",
    "AmbiguousOptionError",
    "BadOptionError",
    "IndentedHelpFormatter",
    "InvalidChoiceError",
    "MissingArgumentError",
    "OptParseError",
    "Option",
    "OptionConflictError",
    "OptionError",
    "OptionParser",
    "OptionValueError",
    "ParseResult",
    "TitledHelpFormatter",
    "UnexpectedArgumentError",
    "Value",
    "Values",
]

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from flagparse.parser.optparser import Option


class OptParseError(Exception):
    def __init__(self, msg: str) -> None:
        super().__init__(msg)
        self.msg = msg

    def __str__(self) -> str:
        return self.msg


class OptionError(OptParseError):
    """
    Raised if an Option instance is created with invalid or
    inconsistent arguments.
    """

    def __init__(self, msg: str, option: Option) -> None:
        super().__init__(msg)
        self.option_id = str(option)

    def __str__(self) -> str:
        if self.option_id:
            return f"option {self.option_id}: {self.msg}"
        return self.msg


class OptionConflictError(OptionError):
    """
    Raised if conflicting options are added to an OptionParser.
    """


class OptionValueError(OptParseError):
    """
    Raised if an invalid option value is encountered on the command
    line.
    """


class InvalidChoiceError(OptionValueError):
    """
    Raised if the value of a 'choice' option is not one of its choices.
    """

    def __init__(self, opt_str: str, value: str, choices: list[str]) -> None:
        self.opt_str = opt_str
        self.value = value
        self.choices = choices
        choices_str = ", ".join(map(repr, choices))
        super().__init__(
            f"option {opt_str}: invalid choice: {value!r} (choose from {choices_str})"
        )


class BadOptionError(OptParseError):
    """
    Raised if an invalid option is seen on the command line.
    """

    def __init__(self, opt_str: str) -> None:
        self.opt_str = opt_str
        super().__init__(f"no such option: {opt_str}")


class AmbiguousOptionError(BadOptionError):
    """
    Raised if an ambiguous option is seen on the command line.
    """

    def __init__(self, opt_str: str, possibilities: list[str]) -> None:
        super().__init__(opt_str)
        self.possibilities = possibilities
        self.msg = "ambiguous option: {} ({}?)".format(
            opt_str, ", ".join(possibilities)
        )


class MissingArgumentError(OptParseError):
    """
    Raised if an option that takes a value runs out of arguments.
    """

    def __init__(self, opt_str: str, nargs: int) -> None:
        self.opt_str = opt_str
        self.nargs = nargs
        msg = f"{opt_str} option requires {nargs:d} argument"
        super().__init__(f"{msg}s" if nargs > 1 else msg)


class UnexpectedArgumentError(OptParseError):
    """
    Raised if a value is attached (``--flag=value``) to an option that
    does not take one.
    """

    def __init__(self, opt_str: str) -> None:
        self.opt_str = opt_str
        super().__init__(f"{opt_str} option does not take a value")

from __future__ import annotations

import logging
import os
import sys

from dataclasses import dataclass
from dataclasses import field
from typing import IO
from typing import TYPE_CHECKING
from typing import Any
from typing import Callable
from typing import Iterable
from typing import Iterator
from typing import Literal
from typing import NoReturn
from typing import Sequence

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
from flagparse.parser.values import APPEND_SEPARATOR
from flagparse.parser.values import Values
from flagparse.parser.values import to_str


if TYPE_CHECKING:
    from flagparse.parser.formatters import HelpFormatter


log = logging.getLogger(__name__)


def _repr(self):
    return f"<{self.__class__.__name__} at 0x{id(self):x}: {self}>"


def _parse_num(val: str, type_: type) -> Any:
    if val[:2].lower() == "0x":  # hexadecimal
        radix = 16
    elif val[:2].lower() == "0b":  # binary
        radix = 2
        val = val[2:] or "0"  # have to remove "0b" prefix
    elif val[:1] == "0":  # octal
        radix = 8
    else:  # decimal
        radix = 10

    return type_(val, radix)


def _parse_int(val: str) -> int:
    return _parse_num(val, int)


_builtin_cvt = {
    "int": (_parse_int, "integer"),
    "long": (_parse_int, "integer"),
    "float": (float, "floating-point"),
    "complex": (complex, "complex"),
}


def check_builtin(option: Option, opt: str, value: str) -> Any:
    (cvt, what) = _builtin_cvt[option.type]
    try:
        return cvt(value)
    except ValueError:
        raise OptionValueError(
            f"option {opt}: invalid {what} value: {value!r}"
        ) from None


def check_choice(option: Option, opt: str, value: str) -> str:
    if value in option.choices:
        return value
    raise InvalidChoiceError(opt, value, list(option.choices))


SUPPRESS_HELP: str = "SUPPRESSHELP"
SUPPRESS_USAGE: str = "SUPPRESSUSAGE"


class Option:
    """
    Instance attributes:
      _short_opts : [string]
      _long_opts : [string]

      action : string
      type : string
      dest : string
      default : string
      nargs : int
      const : string
      choices : [string]
      help : string
      metavar : string

    Every attribute can be given as a keyword argument to the
    constructor or changed afterwards through the chained set_*()
    methods, which return the option itself:

      parser.add_option("-q", "--quiet").set_action("store_false") \\
            .set_dest("verbose").set_default("1")
    """

    # The list of instance attributes that may be set through
    # keyword args to the constructor.
    ATTRS: list[str] = [
        "action",
        "type",
        "dest",
        "default",
        "nargs",
        "const",
        "choices",
        "help",
        "metavar",
    ]

    # The set of actions allowed by option parsers.
    ACTIONS: tuple[str, ...] = (
        "store",
        "store_const",
        "store_true",
        "store_false",
        "append",
        "append_const",
        "count",
        "help",
        "version",
    )

    # The set of actions that involve storing a value somewhere.  (If
    # the action is one of these, there must be a destination.)
    STORE_ACTIONS: tuple[str, ...] = (
        "store",
        "store_const",
        "store_true",
        "store_false",
        "append",
        "append_const",
        "count",
    )

    # The set of actions which consume argument(s) from the command
    # line and therefore have a value type.
    TYPED_ACTIONS: tuple[str, ...] = ("store", "append")

    # The set of actions which take a 'const' attribute.
    CONST_ACTIONS: tuple[str, ...] = ("store_const", "append_const")

    # The set of actions that end argument processing.
    EXIT_ACTIONS: tuple[str, ...] = ("help", "version")

    # The set of known types for option parsers.
    TYPES: tuple[str, ...] = ("string", "int", "long", "float", "complex", "choice")

    # Types whose values are only checked when the parser is strict.
    NUMERIC_TYPES: tuple[str, ...] = ("int", "long", "float", "complex")

    # Dictionary of argument checking functions, which convert and
    # validate option arguments according to the option type.
    #
    # Signature of checking functions is:
    #   check(option : Option, opt : string, value : string) -> any
    # where
    #   option is the Option instance calling the checker
    #   opt is the actual option seen on the command-line
    #     (eg. "-a", "--file")
    #   value is the option argument seen on the command-line
    #
    # If no checker is defined for a type, arguments will be
    # unchecked and remain strings.
    TYPE_CHECKER: dict[str, Callable[[Option, str, str], Any]] = {
        "int": check_builtin,
        "long": check_builtin,
        "float": check_builtin,
        "complex": check_builtin,
        "choice": check_choice,
    }

    CHECK_METHODS: list[Callable[..., Any]]

    # -- Constructor/initialization methods ----------------------------
    action: str
    type: str | None
    dest: str | None
    default: str | None
    nargs: int
    const: str | None
    choices: list[str] | None
    help: str | None
    metavar: str | None

    def __init__(self, *opts: str | None, **attrs: Any) -> None:
        # Set _short_opts, _long_opts attrs from 'opts' tuple.
        # Have to be set now, in case no option strings are supplied.
        self._short_opts: list[str] = []
        self._long_opts: list[str] = []
        opts = self._check_opt_strings(opts)
        self._set_opt_strings(opts)

        # Set all other attrs (action, type, etc.) from 'attrs' dict
        for attr in self.ATTRS:
            setattr(self, attr, attrs.pop(attr, None))
        if attrs:
            attrs = sorted(attrs.keys())
            raise OptionError(f"invalid keyword arguments: {', '.join(attrs)}", self)

        for checker in self.CHECK_METHODS:
            checker(self)

    def _check_opt_strings(self, opts: Iterable[str | None]) -> list[str]:
        # Filter out None so that add_option("-f", None) works.
        opts = [opt for opt in opts if opt]
        if not opts:
            raise TypeError("at least one option string must be supplied")
        return opts

    def _set_opt_strings(self, opts: list[str]) -> None:
        for opt in opts:
            if len(opt) < 2:
                raise OptionError(
                    f"invalid option string {opt!r}: "
                    "must be at least two characters long",
                    self,
                )
            if len(opt) == 2:
                if not (opt[0] == "-" and opt[1] != "-"):
                    raise OptionError(
                        f"invalid short option string {opt!r}: "
                        "must be of the form -x, (x any non-dash char)",
                        self,
                    )
                self._short_opts.append(opt)
            else:
                if not (opt[0:2] == "--" and opt[2] != "-"):
                    raise OptionError(
                        f"invalid long option string {opt!r}: "
                        "must start with --, followed by non-dash",
                        self,
                    )
                self._long_opts.append(opt)

    def _check_action(self) -> None:
        if self.action is None:
            self.action = "store"
        elif self.action not in self.ACTIONS:
            raise OptionError(f"invalid action: {self.action!r}", self)

    def _check_type(self) -> None:
        if self.type is None:
            if self.action in self.TYPED_ACTIONS:
                if self.choices is not None:
                    # The "choices" attribute implies "choice" type.
                    self.type = "choice"
                else:
                    # No type given?  "string" is the most sensible default.
                    self.type = "string"
        else:
            # Allow type objects or builtin type conversion functions
            # (int, str, etc.) as an alternative to their names.
            if isinstance(self.type, type):
                self.type = self.type.__name__

            if self.type == "str":
                self.type = "string"

            if self.type not in self.TYPES:
                raise OptionError(f"invalid option type: {self.type!r}", self)
            if self.action not in self.TYPED_ACTIONS:
                raise OptionError(
                    f"must not supply a type for action {self.action!r}", self
                )

    def _check_choice(self) -> None:
        if self.type == "choice":
            if self.choices is None:
                raise OptionError(
                    "must supply a list of choices for type 'choice'", self
                )
            if isinstance(self.choices, str):
                raise OptionError(
                    "choices must be a list of strings ('str' supplied)", self
                )
            self.choices = [to_str(choice) for choice in self.choices]
        elif self.choices is not None:
            raise OptionError(f"must not supply choices for type {self.type!r}", self)

    def _check_dest(self) -> None:
        takes_value = self.action in self.STORE_ACTIONS
        if self.dest is None and takes_value:
            # Glean a destination from the first long option string,
            # or from the first short option string if no long options.
            if self._long_opts:
                # eg. "--foo-bar" -> "foo_bar"
                self.dest = self._long_opts[0][2:].replace("-", "_")
            else:
                self.dest = self._short_opts[0][1]

    def _check_default(self) -> None:
        if self.default is not None:
            self.default = to_str(self.default)

    def _check_const(self) -> None:
        if self.const is None:
            return
        if self.action not in self.CONST_ACTIONS:
            raise OptionError(
                f"'const' must not be supplied for action {self.action!r}", self
            )
        self.const = to_str(self.const)

    def _check_nargs(self) -> None:
        if self.action in self.TYPED_ACTIONS:
            if self.nargs is None:
                self.nargs = 1
            elif self.nargs < 1:
                raise OptionError(f"invalid nargs: {self.nargs!r}", self)
        else:
            # Flag-style actions never consume arguments.
            self.nargs = 0

    CHECK_METHODS = [
        _check_action,
        _check_type,
        _check_choice,
        _check_dest,
        _check_default,
        _check_const,
        _check_nargs,
    ]

    # -- Chained configuration -----------------------------------------

    def set_action(self, action: str) -> Option:
        self.action = action
        self._check_action()
        if self.action in self.TYPED_ACTIONS:
            if self.type is None:
                self.type = "choice" if self.choices is not None else "string"
            if not self.nargs:
                self.nargs = 1
        else:
            self.type = None
            self.nargs = 0
        self._check_dest()
        return self

    def set_type(self, type_: str | type) -> Option:
        self.type = type_
        self._check_type()
        return self

    def set_dest(self, dest: str) -> Option:
        self.dest = dest
        return self

    def set_default(self, default: Any) -> Option:
        self.default = None if default is None else to_str(default)
        return self

    def set_nargs(self, nargs: int) -> Option:
        if self.action in self.TYPED_ACTIONS:
            self.nargs = nargs
            self._check_nargs()
        return self

    def set_const(self, const: Any) -> Option:
        self.const = to_str(const)
        return self

    def set_choices(self, choices: Iterable[Any]) -> Option:
        self.choices = [to_str(choice) for choice in choices]
        self.type = "choice"
        return self

    def set_help(self, help: str) -> Option:
        self.help = help
        return self

    def set_metavar(self, metavar: str) -> Option:
        self.metavar = metavar
        return self

    # -- Miscellaneous methods -----------------------------------------

    def __str__(self) -> str:
        return "/".join(self._short_opts + self._long_opts)

    __repr__ = _repr

    def takes_value(self) -> bool:
        return self.action in self.TYPED_ACTIONS

    def get_opt_string(self) -> str:
        if self._long_opts:
            return self._long_opts[0]
        return self._short_opts[0]

    # -- Processing methods --------------------------------------------

    def check_value(self, opt: str, value: str, strict: bool = False) -> str:
        checker = self.TYPE_CHECKER.get(self.type)
        if checker is None:
            return value
        if self.type in self.NUMERIC_TYPES and not strict:
            # Left as text; Value.as_int() and friends decay to zero.
            return value
        return to_str(checker(self, opt, value))

    def convert_value(
        self, opt: str, value: str | tuple[str, ...] | None, strict: bool = False
    ) -> str | tuple[str, ...] | None:
        if value is not None:
            if self.nargs == 1:
                return self.check_value(opt, value, strict)
            return tuple([self.check_value(opt, v, strict) for v in value])
        return None

    def process(
        self,
        opt: str,
        value: str | tuple[str, ...] | None,
        values: Values,
        parser: OptionParser,
    ) -> bool:
        """
        Apply this option to 'values'.  Returns True if argument
        processing must stop here (help and version).
        """
        value = self.convert_value(opt, value, parser.strict)
        return self.take_action(self.action, self.dest, opt, value, values, parser)

    def take_action(
        self,
        action: str,
        dest: str,
        opt: str,
        value: str | tuple[str, ...] | None,
        values: Values,
        parser: OptionParser,
    ) -> bool:
        log.debug("%s: %s -> %s", opt, action, dest)
        if isinstance(value, tuple):
            value = APPEND_SEPARATOR.join(value)

        if action == "store":
            values.store(dest, value)
        elif action == "store_const":
            values.store(dest, self.const or "")
        elif action == "store_true":
            values.store(dest, "1")
        elif action == "store_false":
            values.store(dest, "0")
        elif action == "append":
            values.append(dest, value)
        elif action == "append_const":
            values.append(dest, self.const or "")
        elif action == "count":
            values.store(dest, str(values.get(dest).as_int() + 1))
        elif action in self.EXIT_ACTIONS:
            return True
        else:
            raise ValueError(f"unknown action {self.action!r}")

        return False


@dataclass
class ParseResult:
    """
    Outcome of OptionParser.parse_args().

    'exit_action' is "help" or "version" when such an option stopped the
    scan; the caller decides what to print and whether to exit.  'prog'
    is the program name to use when reporting on this parse.
    """

    values: Values
    args: list[str] = field(default_factory=list)
    exit_action: str | None = None
    prog: str | None = None

    def __iter__(self) -> Iterator[Any]:
        # values, args = parser.parse_args()
        return iter((self.values, self.args))


class OptionRegistry:
    """
    Owns the registered options of a parser.

    Instance attributes:
      option_list : [Option]
        the list of Option objects, in registration order
      _short_opt : { string : Option }
        dictionary mapping short option strings, eg. "-f" or "-X",
        to the Option instances that implement them.  If an Option
        has multiple short option strings, it will appear in this
        dictionary multiple times.
      _long_opt : { string : Option }
        dictionary mapping long option strings, eg. "--file" or
        "--exclude", to the Option instances that implement them.
        Again, a given Option can occur multiple times in this
        dictionary.
      defaults : { string : any }
        parser-level defaults (see set_defaults()); they take precedence
        over the defaults of the options themselves
    """

    def __init__(
        self,
        option_class: type[Option],
        conflict_handler: Literal["error", "resolve"],
        description: str | None,
    ) -> None:
        self.option_list: list[Option] = []
        self._short_opt: dict[str, Option] = {}  # "-x" -> Option instance
        self._long_opt: dict[str, Option] = {}  # "--xxx" -> Option instance
        self.defaults: dict[str, str] = {}  # maps option dest -> default value

        self.option_class: type[Option] = option_class
        self.set_conflict_handler(conflict_handler)
        self.set_description(description)

    def set_conflict_handler(self, handler: Literal["error", "resolve"]) -> None:
        if handler not in ("error", "resolve"):
            raise ValueError(f"invalid conflict_resolution value {handler!r}")
        self.conflict_handler = handler

    def set_description(self, description: str | None) -> None:
        self.description = description

    def get_description(self) -> str | None:
        return self.description

    # -- Option-adding methods -----------------------------------------

    def _check_conflict(self, option: Option) -> None:
        conflict_opts = []
        for opt in option._short_opts:
            if opt in self._short_opt:
                conflict_opts.append((opt, self._short_opt[opt]))
        for opt in option._long_opts:
            if opt in self._long_opt:
                conflict_opts.append((opt, self._long_opt[opt]))

        if conflict_opts:
            handler = self.conflict_handler
            if handler == "error":
                raise OptionConflictError(
                    "conflicting option string(s): {}".format(
                        ", ".join([co[0] for co in conflict_opts])
                    ),
                    option,
                )
            if handler == "resolve":
                for opt, c_option in conflict_opts:
                    if opt.startswith("--"):
                        c_option._long_opts.remove(opt)
                        del self._long_opt[opt]
                    else:
                        c_option._short_opts.remove(opt)
                        del self._short_opt[opt]
                    if not (c_option._short_opts or c_option._long_opts):
                        self.option_list.remove(c_option)

    def add_option(self, *args: Any, **kwargs: Any) -> Option:
        """add_option(Option)
        add_option(opt_str, ..., kwarg=val, ...)
        """
        if args and isinstance(args[0], str):
            option = self.option_class(*args, **kwargs)
        elif len(args) == 1 and not kwargs:
            option = args[0]
            if not isinstance(option, Option):
                raise TypeError(f"not an Option instance: {option!r}")
        else:
            raise TypeError("invalid arguments")

        self._check_conflict(option)

        self.option_list.append(option)
        for opt in option._short_opts:
            self._short_opt[opt] = option
        for opt in option._long_opts:
            self._long_opt[opt] = option

        return option

    def add_options(self, option_list: Iterable[Option]) -> None:
        for option in option_list:
            self.add_option(option)

    def set_default(self, dest: str, value: Any) -> None:
        if value is None:
            self.defaults.pop(dest, None)
        else:
            self.defaults[dest] = to_str(value)

    def set_defaults(
        self, dest: str | None = None, value: Any = None, /, **kwargs: Any
    ) -> None:
        """set_defaults(dest, value)
        set_defaults(dest=value, ...)
        """
        if dest is not None:
            self.set_default(dest, value)
        for key, val in kwargs.items():
            self.set_default(key, val)

    def get_default_values(self) -> Values:
        defaults: dict[str, str] = {}
        for option in self.option_list:
            if option.dest is not None and option.default is not None:
                defaults[option.dest] = option.default
        defaults.update(self.defaults)
        return Values(defaults)

    # -- Option query/removal methods ----------------------------------

    def get_option(self, opt_str: str) -> Option | None:
        return self._short_opt.get(opt_str) or self._long_opt.get(opt_str)

    def has_option(self, opt_str: str) -> bool:
        return opt_str in self._short_opt or opt_str in self._long_opt

    def remove_option(self, opt_str: str) -> None:
        option = self._short_opt.get(opt_str)
        if option is None:
            option = self._long_opt.get(opt_str)
        if option is None:
            raise ValueError(f"no such option {opt_str!r}")

        for opt in option._short_opts:
            del self._short_opt[opt]
        for opt in option._long_opts:
            del self._long_opt[opt]
        self.option_list.remove(option)

    def _match_long_opt(self, opt: str) -> str:
        """_match_long_opt(opt : string) -> string

        Determine which long option string 'opt' matches, ie. which one
        it is an unambiguous abbreviation for.  Raises BadOptionError if
        'opt' doesn't unambiguously match any long option string.
        """
        if len(opt) <= 2:
            # "--=value": an empty name would prefix-match everything.
            raise BadOptionError(opt)
        return _match_abbrev(opt, self._long_opt)

    # -- Help-formatting methods ---------------------------------------

    def format_option_help(self, formatter: HelpFormatter) -> str:
        if not self.option_list:
            return ""
        result = []
        for option in self.option_list:
            if option.help != SUPPRESS_HELP:
                result.append(formatter.format_option(option))
        return "".join(result)

    def format_description(self, formatter: HelpFormatter) -> str:
        return formatter.format_description(self.get_description())


class OptionParser(OptionRegistry):
    """
    Class attributes:
      standard_option_list : [Option]
        list of standard options that will be accepted by all instances
        of this parser class (intended to be overridden by subclasses).

    Instance attributes:
      usage : string
        a usage string for your program.  Before it is displayed
        to the user, "%prog" will be expanded to the name of
        your program (self.prog or os.path.basename(sys.argv[0])).
      prog : string
        the name of the current program (to override
        os.path.basename(sys.argv[0])).
      description : string
        A paragraph of text giving a brief overview of your program.
        It is reformatted to fit the terminal width and printed when
        the user requests help (after usage, but before the list of
        options).
      epilog : string
        paragraph of help text to print after option help

      allow_interspersed_args : bool = true
        if true, positional arguments may be interspersed with options.
        Assuming -a and -b each take a single argument, the command-line
          -ablah foo bar -bboo baz
        will be interpreted the same as
          -ablah -bboo -- foo bar baz
        If this flag were false, that command line would be interpreted as
          -ablah -- foo bar -bboo baz
        -- ie. we stop processing options as soon as we see the first
        non-option argument.

      strict : bool = false
        if true, values of int/long/float/complex options are checked
        (and normalized) when they are stored, and a malformed number
        raises OptionValueError.  Otherwise they are stored as typed and
        only converted, leniently, by Value.as_int() and friends.

    parse_args() keeps no state on the parser: the values and leftover
    arguments of a call live in the ParseResult it returns.
    """

    standard_option_list: list[Option] = []

    def __init__(
        self,
        usage: str | None = None,
        option_list: list[Option] | None = None,
        option_class: type[Option] = Option,
        version: str | None = None,
        conflict_handler: Literal["error", "resolve"] = "error",
        description: str | None = None,
        formatter: HelpFormatter | None = None,
        add_help_option: bool = True,
        prog: str | None = None,
        epilog: str | None = None,
        add_version_option: bool = True,
        strict: bool = False,
    ) -> None:
        super().__init__(option_class, conflict_handler, description)
        self.set_usage(usage)
        self.prog = prog
        self.version = version
        self.allow_interspersed_args: bool = True
        self.strict: bool = strict
        if formatter is None:
            formatter = IndentedHelpFormatter()
        self.formatter = formatter
        self.formatter.set_parser(self)
        self.epilog: str | None = epilog

        # Populate the option list; initial sources are the
        # standard_option_list class attribute, the 'option_list'
        # argument, and (if applicable) the _add_version_option() and
        # _add_help_option() methods.
        self._populate_option_list(
            option_list,
            add_help=add_help_option,
            add_version=add_version_option,
        )

    # -- Private methods -----------------------------------------------
    # (used by our constructor)

    def _add_help_option(self) -> None:
        self.add_option(
            "-h", "--help", action="help", help="show this help message and exit"
        )

    def _add_version_option(self) -> None:
        self.add_option(
            "--version",
            action="version",
            help="show program's version number and exit",
        )

    def _populate_option_list(
        self,
        option_list: list[Option] | None,
        add_help: bool = True,
        add_version: bool = True,
    ) -> None:
        if self.standard_option_list:
            self.add_options(self.standard_option_list)
        if option_list:
            self.add_options(option_list)
        if self.version and add_version:
            self._add_version_option()
        if add_help:
            self._add_help_option()

    # -- Simple modifier methods ---------------------------------------

    def set_usage(self, usage: str | None) -> None:
        if usage is None:
            self.usage = "%prog [options]"
        elif usage == SUPPRESS_USAGE:
            self.usage = None
        elif usage.lower().startswith("usage: "):
            self.usage = usage[7:]
        else:
            self.usage = usage

    def enable_interspersed_args(self) -> None:
        """Set parsing to not stop on the first non-option, allowing
        interspersing switches with command arguments. This is the
        default behavior."""
        self.allow_interspersed_args = True

    def disable_interspersed_args(self) -> None:
        """Set parsing to stop on the first non-option. Use this if
        you have a command processor which runs another command that
        has options of its own and you want to make sure these options
        don't get confused.
        """
        self.allow_interspersed_args = False

    def set_strict(self, strict: bool) -> None:
        self.strict = strict

    # -- Option-parsing methods ----------------------------------------

    def parse_args(self, args: Sequence[str] | None = None) -> ParseResult:
        """
        parse_args(args : [string] = sys.argv[1:]) -> ParseResult

        Parse the command-line options found in 'args' (default:
        sys.argv[1:]).  The caller's sequence is left untouched.  Returns
        a ParseResult holding a fresh Values instance (with all your
        option values) and the list of arguments left over after parsing
        options.  Errors are raised as OptParseError subclasses; see
        parse_args_or_exit() for the command-line behaviour of printing
        them and exiting.
        """
        rargs = list(sys.argv[1:] if args is None else args)
        values = self.get_default_values()

        # rargs is the rest of the command-line (the "r" stands for
        # "remaining" or "right-hand"), largs the leftover arguments, ie.
        # what's left after removing options and their arguments (the
        # "l" stands for "leftover" or "left-hand").
        largs: list[str] = []
        exit_action = self._process_args(largs, rargs, values)

        values, args = self.check_values(values, largs + rargs)
        return ParseResult(values, args, exit_action, self.get_prog_name())

    def parse_argv(self, argv: Sequence[str]) -> ParseResult:
        """
        Parse a conventional argv, whose first element is the program
        name.  Unless the parser has a 'prog' of its own, the basename
        of that element is reported as the result's 'prog'; the parser
        itself is left unchanged.
        """
        argv = list(argv)
        result = self.parse_args(argv[1:])
        if argv and self.prog is None:
            result.prog = os.path.basename(argv[0])
        return result

    def check_values(self, values: Values, args: list[str]) -> tuple[Values, list[str]]:
        """
        check_values(values : Values, args : [string])
        -> (values : Values, args : [string])

        Check that the supplied option values and leftover arguments are
        valid.  Returns the option values and leftover arguments
        (possibly adjusted, possibly completely new -- whatever you
        like).  Default implementation just returns the passed-in
        values; subclasses may override as desired.
        """
        return (values, args)

    def _process_args(
        self, largs: list[str], rargs: list[str], values: Values
    ) -> str | None:
        """_process_args(largs : [string],
                         rargs : [string],
                         values : Values) -> string | None

        Process command-line arguments and populate 'values', consuming
        options and arguments from 'rargs'.  If 'allow_interspersed_args' is
        false, stop at the first non-option argument.  If true, accumulate any
        interspersed non-option arguments in 'largs'.  Returns the action
        ("help" or "version") of an option that ended processing early.
        """
        while rargs:
            arg = rargs[0]
            # We handle bare "--" explicitly, and bare "-" is handled by the
            # standard arg handler since the short arg case ensures that the
            # len of the opt string is greater than 1.
            if arg == "--":
                del rargs[0]
                log.debug("'--' seen, %d argument(s) left as positional", len(rargs))
                return None
            if arg[0:2] == "--":
                # process a single long option (possibly with value(s))
                option = self._process_long_opt(rargs, values)
            elif arg[:1] == "-" and len(arg) > 1:
                # process a cluster of short options (possibly with
                # value(s) for the last one only)
                option = self._process_short_opts(rargs, values)
            elif self.allow_interspersed_args:
                largs.append(arg)
                del rargs[0]
                continue
            else:
                log.debug("stopping at first positional argument %r", arg)
                return None  # stop now, leave this arg in rargs

            if option.action in Option.EXIT_ACTIONS:
                log.debug("%s requested, stopping", option.action)
                return option.action

        return None

    def _take_values(
        self, opt: str, option: Option, rargs: list[str]
    ) -> str | tuple[str, ...]:
        nargs = option.nargs
        if len(rargs) < nargs:
            raise MissingArgumentError(opt, nargs)
        if nargs == 1:
            return rargs.pop(0)
        value = tuple(rargs[0:nargs])
        del rargs[0:nargs]
        return value

    def _process_long_opt(self, rargs: list[str], values: Values) -> Option:
        arg = rargs.pop(0)

        # Value explicitly attached to arg?  Pretend it's the next
        # argument.
        if "=" in arg:
            (opt, next_arg) = arg.split("=", 1)
            had_explicit_value = True
        else:
            opt = arg
            had_explicit_value = False

        opt = self._match_long_opt(opt)
        option = self._long_opt[opt]
        if option.takes_value():
            if had_explicit_value:
                rargs.insert(0, next_arg)
            value = self._take_values(opt, option, rargs)
        elif had_explicit_value:
            raise UnexpectedArgumentError(opt)
        else:
            value = None

        option.process(opt, value, values, self)
        return option

    def _process_short_opts(self, rargs: list[str], values: Values) -> Option:
        arg = rargs.pop(0)
        i = 1
        for ch in arg[1:]:
            opt = "-" + ch
            option = self._short_opt.get(opt)
            i += 1  # we have consumed a character

            if not option:
                raise BadOptionError(opt)
            if option.takes_value():
                # Any characters left in arg?  Pretend they're the
                # next arg, and stop consuming characters of arg.
                if i < len(arg):
                    rargs.insert(0, arg[i:])
                value = self._take_values(opt, option, rargs)
                option.process(opt, value, values, self)
                return option

            if option.process(opt, None, values, self):
                return option

        return option

    # -- Feedback methods ----------------------------------------------

    def get_prog_name(self) -> str:
        if self.prog is None:
            return os.path.basename(sys.argv[0])
        return self.prog

    def expand_prog_name(self, s: str) -> str:
        return s.replace("%prog", self.get_prog_name())

    def get_description(self) -> str | None:
        if self.description is None:
            return None
        return self.expand_prog_name(self.description)

    def exit(self, status: int = 0, msg: str | None = None) -> NoReturn:
        if msg:
            sys.stderr.write(msg)
        sys.exit(status)

    def format_error(self, msg: str) -> str:
        return f"{self.get_prog_name()}: error: {msg}"

    def error(self, msg: str) -> NoReturn:
        """error(msg : string)

        Print a usage message incorporating 'msg' to stderr and exit.
        If you override this in a subclass, it should not return -- it
        should either exit or raise an exception.
        """
        self.print_usage(sys.stderr)
        self.exit(2, f"{self.format_error(msg)}\n")

    def parse_args_or_exit(self, args: Sequence[str] | None = None) -> ParseResult:
        """
        Command-line front end to parse_args(): errors are reported
        through error(), and help/version are printed before exiting
        with status 0.
        """
        try:
            result = self.parse_args(args)
        except OptParseError as err:
            self.error(str(err))

        if result.exit_action == "help":
            self.print_help()
            self.exit()
        elif result.exit_action == "version":
            self.print_version()
            self.exit()
        return result

    def get_usage(self) -> str:
        if self.usage:
            return self.formatter.format_usage(self.expand_prog_name(self.usage))
        return ""

    def print_usage(self, file: IO[str] | None = None) -> None:
        """print_usage(file : file = stdout)

        Print the usage message for the current program (self.usage) to
        'file' (default stdout).  Any occurrence of the string "%prog" in
        self.usage is replaced with the name of the current program
        (basename of sys.argv[0]).  Does nothing if self.usage is empty
        or not defined.
        """
        if self.usage:
            print(self.get_usage(), file=file)

    def get_version(self) -> str:
        if self.version:
            return self.expand_prog_name(self.version)
        return ""

    def print_version(self, file: IO[str] | None = None) -> None:
        """print_version(file : file = stdout)

        Print the version message for this program (self.version) to
        'file' (default stdout).  As with print_usage(), any occurrence
        of "%prog" in self.version is replaced by the current program's
        name.  Does nothing if self.version is empty or undefined.
        """
        if self.version:
            print(self.get_version(), file=file)

    def format_option_help(self, formatter: HelpFormatter | None = None) -> str:
        formatter = formatter or self.formatter
        formatter.store_option_strings(self)
        if not self.option_list:
            return ""
        result = [formatter.format_heading("Options")]
        formatter.indent()
        result.append(super().format_option_help(formatter))
        formatter.dedent()
        return "".join(result)

    def format_epilog(self, formatter: HelpFormatter) -> str:
        return formatter.format_epilog(self.epilog)

    def format_help(self, formatter: HelpFormatter | None = None) -> str:
        if formatter is None:
            formatter = self.formatter
        result = []
        if self.usage:
            result.append(self.get_usage() + "\n")
        if self.description:
            result.append(self.format_description(formatter) + "\n")
        result.append(self.format_option_help(formatter))
        result.append(self.format_epilog(formatter))
        return "".join(result)

    def print_help(self, file: IO[str] | None = None) -> None:
        """print_help(file : file = stdout)

        Print an extended help message, listing all options and any
        help text provided with them, to 'file' (default stdout).
        """
        if file is None:
            file = sys.stdout
        file.write(self.format_help())


# class OptionParser


def _match_abbrev(s: str, wordmap: dict[str, Option]) -> str:
    """_match_abbrev(s : string, wordmap : {string : Option}) -> string

    Return the string key in 'wordmap' for which 's' is an unambiguous
    abbreviation.  If 's' is found to be ambiguous or doesn't match any of
    'words', raise BadOptionError.
    """
    # Is there an exact match?
    if s in wordmap:
        return s
    # Isolate all words with s as a prefix.
    possibilities = [word for word in wordmap if word.startswith(s)]
    # No exact match, so there had better be just one possibility.
    if len(possibilities) == 1:
        return possibilities[0]
    if not possibilities:
        raise BadOptionError(s)
    # More than one possible completion: ambiguous prefix.
    possibilities.sort()
    raise AmbiguousOptionError(s, possibilities)

import sys
import pathlib
import logging

import argparse
import enum
import inspect
from typing import Any, Callable, Dict, IO, List, Optional, Sequence, Type, Union, get_args, get_origin

from pydantic import BaseModel, ValidationError

from addrkit.core.errors import NotBindable, ResolutionFailure
from addrkit.core.models import AddressList
from addrkit.core.plugin import BasePlugin
from addrkit.core.registry import get_all_plugins

logger = logging.getLogger("addrkit.cli")

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

# Parameters handled by the CLI itself, never turned into flags
SKIPPED_PARAMS = ("self", "args", "kwargs")


def setup_cli_logging(verbose: bool = False, log_file_path_str: Optional[str] = None):
    log_level = logging.DEBUG if verbose else logging.INFO
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file_path_str:
        try:
            log_file_path = pathlib.Path(log_file_path_str)
            log_file_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file_path, mode='a')
            handlers.append(file_handler)
        except OSError as e:
            print(f"Error: Failed to set up log file at '{log_file_path_str}': {e}", file=sys.stderr)

    logging.basicConfig(
        level=log_level,
        format="%(name)s [%(levelname)s] - %(message)s",
        handlers=handlers,
        force=True
    )


def load_plugin_modules():
    """Imports plugin modules to trigger their registration."""
    import addrkit.resolve
    import addrkit.validate


def get_underlying_type(annotation: Any) -> Any:
    """Gets the underlying type from Optional or List annotations for argparse."""
    origin = get_origin(annotation)
    if origin is Union:
        non_none_args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(non_none_args) == 1:
            return non_none_args[0]
    elif origin is list or origin is List:
        list_arg = get_args(annotation)
        if list_arg:
            return list_arg[0]
    return annotation


def add_method_arguments(parser: argparse.ArgumentParser, method: Callable[..., Any]) -> List[str]:
    """
    Inspects a plugin method and adds one flag per parameter.
    Returns the parameter names so the parsed values can be routed back.
    """
    names = []
    for name, param in inspect.signature(method).parameters.items():
        if name in SKIPPED_PARAMS or param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
            continue

        arg_name = f"--{name.replace('_', '-')}"
        arg_kwargs: Dict[str, Any] = {"dest": name}
        underlying_type = get_underlying_type(param.annotation)

        if underlying_type is bool:
            arg_kwargs["action"] = "store_false" if param.default is True else "store_true"
        else:
            if get_origin(param.annotation) in (list, List):
                arg_kwargs["nargs"] = "+"
            if inspect.isclass(underlying_type) and issubclass(underlying_type, enum.Enum):
                arg_kwargs["choices"] = list(underlying_type)
            if underlying_type not in (Any, inspect.Parameter.empty):
                arg_kwargs["type"] = underlying_type
            if param.default is inspect.Parameter.empty:
                arg_kwargs["required"] = True
            else:
                arg_kwargs["default"] = param.default

        help_str = getattr(underlying_type, "__name__", str(underlying_type))
        if "default" in arg_kwargs:
            default = arg_kwargs["default"]
            help_str += f" (default: {default.value if isinstance(default, enum.Enum) else default})"
        arg_kwargs["help"] = help_str

        parser.add_argument(arg_name, **arg_kwargs)
        names.append(name)
    return names


def build_parser(plugins: Sequence[Type[BasePlugin]]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="addrkit",
        description="Resolve and bind-check the addresses a network tool listens on or sends from.",
    )
    parser.add_argument("-v", "--verbose", help="Increase output verbosity", action="store_true")
    parser.add_argument("-l", "--log-file", help="Also append log output to this file", default=None)
    parser.add_argument(
        "-o", "--output-file", type=pathlib.Path,
        help="Write the JSON result here instead of standard output."
    )

    subparsers = parser.add_subparsers(help='command help', dest='command', required=True)
    for plugin_cls in sorted(plugins, key=lambda p: p.name):
        command_parser = subparsers.add_parser(
            plugin_cls.name,
            help=plugin_cls.description or inspect.getdoc(plugin_cls),
        )
        init_params = add_method_arguments(command_parser, plugin_cls.__init__)
        run_params = add_method_arguments(command_parser, plugin_cls.run)
        command_parser.set_defaults(plugin_cls=plugin_cls, init_params=init_params, run_params=run_params)
    return parser


def write_banner(result: BaseModel, stream: IO[str], label: Optional[str]) -> None:
    """Announce resolved addresses to the operator, one line per address."""
    if isinstance(result, AddressList):
        if label:
            result.write(stream, label, f"\n{label}", "\n")
        return
    # Composite results carry one AddressList per field; the field name is the label.
    for field_name in type(result).model_fields:
        value = getattr(result, field_name)
        if isinstance(value, AddressList):
            label = f"{field_name.capitalize()}: "
            value.write(stream, label, f"\n{label}", "\n")


def write_result(result: BaseModel, output_file: Optional[pathlib.Path]) -> None:
    payload = result.model_dump_json(indent=2)
    if output_file:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(payload + "\n")
        logger.info(f"Wrote result to {output_file}")
    else:
        print(payload)


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_plugin_modules()
    parser = build_parser(get_all_plugins())
    args = parser.parse_args(argv)

    setup_cli_logging(
        verbose=args.verbose,
        log_file_path_str=args.log_file
    )

    plugin_cls = args.plugin_cls
    init_args = {name: getattr(args, name) for name in args.init_params}
    run_args = {name: getattr(args, name) for name in args.run_params}
    logger.debug(f"Running {plugin_cls.kind}/{plugin_cls.name} with {run_args}")

    try:
        plugin = plugin_cls(**init_args)
        result = plugin.run(**run_args)
    except (ResolutionFailure, NotBindable) as e:
        # Already logged with the offending address where it happened
        logger.debug(f"{plugin_cls.name}: {e}")
        return EXIT_FAILURE
    except ValidationError as e:
        logger.error(f"{plugin_cls.name}: invalid input: {e}")
        return EXIT_USAGE
    except ValueError as e:
        logger.error(f"{plugin_cls.name}: {e}")
        return EXIT_USAGE
    except OSError as e:
        logger.error(f"{plugin_cls.name}: {e}")
        return EXIT_FAILURE

    write_banner(result, sys.stderr, getattr(plugin_cls, "banner", None))
    write_result(result, args.output_file)
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())

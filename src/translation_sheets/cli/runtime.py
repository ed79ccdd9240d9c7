from __future__ import annotations
import sys
import traceback
from typing import Optional, Protocol, Sequence

from ..core.errors import ConversionError


class MainFunc(Protocol):
    def __call__(self, argv: Optional[list[str]] = None) -> int: ...


def _peek_verbosity(argv: Sequence[str]) -> int:
    # main() does the real parsing; this only decides how loud a crash is
    count = 0
    for a in argv:
        if a == "--verbose":
            count += 1
        elif a.startswith("-") and not a.startswith("--") and set(a[1:]) == {"v"}:
            count += len(a) - 1
    return count


def run_cli(main_func: MainFunc, argv: Optional[list[str]] = None) -> None:
    """
    Run main_func(argv) and exit with its return code.

    - ConversionError (bad selection, no files, ...): one 'Error: ...' line
    - other exceptions: 'Error: ...', or the full traceback with '--debug' / '-vv'
    """
    argv = list(sys.argv[1:] if argv is None else argv)
    debug = "--debug" in argv
    verbosity = _peek_verbosity(argv)

    try:
        code = main_func(argv)
    except SystemExit:
        raise
    except ConversionError as e:
        if debug:
            traceback.print_exc()
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(1)
    except Exception as e:
        if debug or verbosity >= 2:
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(1)
    else:
        raise SystemExit(code)

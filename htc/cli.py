from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .build import run_build
from .compiler import compile_element, compile_template
from .errors import HtcUserError
from .render.dialects import DIALECTS, get_dialect
from .version import tool_version


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="htc",
        description="HTML Template Compiler (compile-time checked HTML templates)",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument("--verbose", action="store_true", help="отладочный вывод в stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    def add_dialect(sp: argparse.ArgumentParser, default: str | None) -> None:
        sp.add_argument(
            "--dialect",
            choices=sorted(DIALECTS),
            default=default,
            help="целевой язык генерируемых выражений",
        )

    sp_build = sub.add_parser("build", help="Подставить <%%= %%> в исходник и записать результат")
    sp_build.add_argument("source", help="исходный файл")
    sp_build.add_argument("target", help="файл результата")
    sp_build.add_argument(
        "overrides",
        nargs="*",
        metavar="KEY=VALUE",
        help="переопределения данных шаблона (применяются последними)",
    )
    sp_build.add_argument("--root", default=".", help="корень проекта (htc.yaml, package.json, src/)")
    # None — взять диалект из htc.yaml
    add_dialect(sp_build, None)

    sp_compile = sub.add_parser("compile", help="Скомпилировать один HTML-шаблон и вывести выражение")
    sp_compile.add_argument("template", help="текст шаблона")
    sp_compile.add_argument("--context", default="", help="окружающий HTML-контекст (по умолчанию верхний уровень)")
    sp_compile.add_argument("--element", action="store_true", help="обернуть результат в {innerHTML: ...}")
    add_dialect(sp_compile, "coffee")

    return p


def main(argv: list[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)

    if ns.verbose:
        logging.basicConfig(level=logging.DEBUG, format="[%(levelname)s] %(name)s: %(message)s")

    try:
        if ns.cmd == "build":
            run_build(
                Path(ns.source),
                Path(ns.target),
                overrides=ns.overrides,
                root=Path(ns.root),
                dialect=ns.dialect,
            )
            return 0

        if ns.cmd == "compile":
            dialect = get_dialect(ns.dialect)
            if ns.element:
                if ns.context:
                    raise HtcUserError("--element compiles at top level; --context cannot be used with it")
                output = compile_element(ns.template, dialect=dialect)
            else:
                output = compile_template(ns.template, ns.context, dialect=dialect)
            sys.stdout.write(output + "\n")
            return 0

    except HtcUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())

"""CLI commands for inspecting file names.

Provides ``vfsnames parse``, ``vfsnames layer`` and ``vfsnames schemes``.
"""

import json

from funcy import select_values

from vfsnames.cli.command import CmdBase
from vfsnames.domain.entities.filename import (
    FileName,
    HostFileName,
    LayeredFileName,
    ShareFileName,
)
from vfsnames.log import logger

logger = logger.getChild(__name__)


def describe(name: FileName) -> dict:
    """Summarize a name as a flat dict, password masked.

    Fields that do not apply to the name are left out.
    """
    info = {
        "uri": name.friendly_uri,
        "scheme": name.scheme,
        "path": name.path,
        "type": name.type.value,
    }
    if isinstance(name, HostFileName):
        info.update(
            hostname=name.hostname,
            port=name.port,
            username=name.username,
            domain=name.domain,
        )
    if isinstance(name, ShareFileName):
        info["share"] = name.share
    if isinstance(name, LayeredFileName):
        info["outer"] = name.outer.friendly_uri
    return select_values(lambda value: value is not None, info)


def _write(info: dict) -> None:
    width = max(len(key) for key in info) + 2
    for key, value in info.items():
        print(f"{key.capitalize() + ':':<{width}}{value}")


class CmdNameParse(CmdBase):
    """Parse URIs and show their parts."""

    def run(self):
        results = []
        for uri in self.args.uris:
            name = self.manager.parse(uri)
            logger.debug("'%s' -> '%s'", uri, name.friendly_uri)
            results.append(describe(name))

        if self.args.json:
            print(json.dumps(results, indent=2))
            return 0

        for i, info in enumerate(results):
            if i:
                print()
            _write(info)
        return 0


class CmdNameLayer(CmdBase):
    """Show the root of a layered file system over a file."""

    def run(self):
        name = self.manager.build_layered(self.args.outer, self.args.scheme)
        print(name.friendly_uri)
        return 0


class CmdSchemeList(CmdBase):
    """List the registered schemes."""

    def run(self):
        registry = self.manager.registry
        for profile in registry:
            port = profile.default_port or "-"
            print(f"  {profile.scheme:<8}{port:<6}[{profile.name_kind.value}]")
        for scheme in registry.layered_schemes:
            print(f"  {scheme:<8}{'-':<6}[LAYERED]")
        return 0


def add_parser(subparsers, parent_parser):
    """Register the name commands."""
    # -- parse --
    parse_parser = subparsers.add_parser(
        "parse",
        parents=[parent_parser],
        help="Parse URIs and show their parts.",
    )
    parse_parser.add_argument("uris", nargs="+", metavar="URI", help="URI.")
    parse_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Show output in JSON format.",
    )
    parse_parser.set_defaults(func=CmdNameParse)

    # -- layer --
    layer_parser = subparsers.add_parser(
        "layer",
        parents=[parent_parser],
        help="Show the root of a layered file system over a file.",
    )
    layer_parser.add_argument("scheme", help="Layered scheme, e.g. zip.")
    layer_parser.add_argument("outer", help="URI of the outer file.")
    layer_parser.set_defaults(func=CmdNameLayer)

    # -- schemes --
    schemes_parser = subparsers.add_parser(
        "schemes",
        parents=[parent_parser],
        help="List the registered schemes.",
    )
    schemes_parser.set_defaults(func=CmdSchemeList)

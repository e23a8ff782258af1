from pathlib import Path

import pytest

from tikvkit.cli import CommandArgs, parse_args
from tikvkit.config import Config


def test_default_endpoint():
    args = parse_args("raw", [])
    assert args.pd == ["localhost:2379"]
    assert args.ca is None and args.cert is None and args.key is None


def test_comma_separated_endpoints():
    args = parse_args("txn", ["--pd", "pd1:1,pd2:2"])
    assert args.pd == ["pd1:1", "pd2:2"]


def test_repeated_and_aliased_endpoints():
    args = parse_args("txn", ["--pd", "pd1:1", "--pd-endpoints", "pd2:2,pd3:3"])
    assert args.pd == ["pd1:1", "pd2:2", "pd3:3"]


def test_security_options():
    args = parse_args(
        "txn", ["--ca", "root.ca", "--cert", "internal.cert", "--private-key", "internal.key"]
    )
    assert args.ca == Path("root.ca")
    assert args.cert == Path("internal.cert")
    assert args.key == Path("internal.key")


@pytest.mark.parametrize(
    "argv",
    [
        ["--ca", "root.ca"],
        ["--cert", "internal.cert"],
        ["--key", "internal.key"],
        ["--ca", "root.ca", "--cert", "internal.cert"],
        ["--cert", "internal.cert", "--key", "internal.key"],
    ],
)
def test_incomplete_security_is_rejected(argv):
    with pytest.raises(SystemExit) as excinfo:
        parse_args("raw", argv)
    assert excinfo.value.code == 2


def test_to_config_with_security():
    args = parse_args("raw", ["--ca", "root.ca", "--cert", "internal.cert", "--key", "internal.key"])
    assert args.to_config() == Config().with_security("root.ca", "internal.cert", "internal.key")


def test_to_config_without_security():
    assert CommandArgs().to_config() == Config()


def test_to_config_partial_security_is_plain():
    args = CommandArgs(ca=Path("root.ca"))
    assert args.to_config().ca_path is None
import json
import tomllib

import pytest
from click.testing import CliRunner

from advisory_ids.cli.root import root


@pytest.fixture
def runner():
    return CliRunner()


def test_parse(runner):
    result = runner.invoke(root, ["id", "parse", "CVE-2017-1000168", "RUSTSEC-0000-0000"])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == [
        {
            "id": "CVE-2017-1000168",
            "kind": "cve",
            "year": 2017,
            "numerical_part": 1000168,
            "url": "https://cve.mitre.org/cgi-bin/cvename.cgi?name=CVE-2017-1000168",
            "placeholder": False,
        },
        {
            "id": "RUSTSEC-0000-0000",
            "kind": "rustsec",
            "year": None,
            "numerical_part": None,
            "url": None,
            "placeholder": True,
        },
    ]


def test_parse_sorted_from_file(runner, tmp_path):
    path = tmp_path / "ids.txt"
    path.write_text("Anonymous-42\n\nGHSA-4mmc-49vf-jmcp\nRUSTSEC-2018-0001\n")

    result = runner.invoke(root, ["id", "parse", "--sort", "--file", str(path), "CVE-2017-1000168"])

    assert result.exit_code == 0
    assert [r["id"] for r in json.loads(result.stdout)] == [
        "RUSTSEC-2018-0001",
        "CVE-2017-1000168",
        "GHSA-4mmc-49vf-jmcp",
        "Anonymous-42",
    ]


def test_parse_reports_every_failure(runner):
    result = runner.invoke(root, ["id", "parse", "CVE-2017", "CVE-2017-1000168", "RUSTSEC-18-0001"])

    assert result.exit_code == 1
    assert "incomplete advisory ID: CVE-2017" in result.output
    assert "out-of-range year in advisory ID: RUSTSEC-18-0001" in result.output
    assert "Failed to parse 2 of 3 advisory identifiers" in result.output


def test_url(runner):
    result = runner.invoke(root, ["id", "url", "RUSTSEC-2018-0001", "Anonymous-42", "GHSA-4mmc-49vf-jmcp"])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "https://rustsec.org/advisories/RUSTSEC-2018-0001",
        "https://github.com/advisories/GHSA-4mmc-49vf-jmcp",
    ]
    assert "No URL is known for Anonymous-42" in result.output


def test_url_requires_identifiers(runner):
    result = runner.invoke(root, ["id", "url"])
    assert result.exit_code != 0


def test_aliases_json(runner):
    result = runner.invoke(root, ["id", "aliases", "CVE-2017-1000168", "TALOS-2017-0468", "CVE-2017-1000168"])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {
        "rustsec": [],
        "cve": ["CVE-2017-1000168"],
        "ghsa": [],
        "talos": ["TALOS-2017-0468"],
        "other": [],
    }


def test_aliases_toml(runner):
    result = runner.invoke(root, ["id", "aliases", "--format", "toml", "GHSA-4mmc-49vf-jmcp", "RUSTSEC-2018-0001"])

    assert result.exit_code == 0
    assert tomllib.loads(result.stdout) == {
        "aliases": {
            "rustsec": ["RUSTSEC-2018-0001"],
            "ghsa": ["GHSA-4mmc-49vf-jmcp"],
        },
    }


def test_aliases_rejects_malformed(runner):
    result = runner.invoke(root, ["id", "aliases", "CVE-2017-abc"])

    assert result.exit_code == 1
    assert "malformed advisory ID: CVE-2017-abc" in result.output


def test_parse_file_keeps_surrounding_whitespace(runner, tmp_path):
    path = tmp_path / "ids.txt"
    path.write_text(" CVE-2017-1000168\r\nGHSA-4mmc-49vf-jmcp \n\n")

    result = runner.invoke(root, ["id", "parse", "--file", str(path)])

    assert result.exit_code == 0
    assert [(r["id"], r["kind"]) for r in json.loads(result.stdout)] == [
        (" CVE-2017-1000168", "other"),
        ("GHSA-4mmc-49vf-jmcp ", "ghsa"),
    ]

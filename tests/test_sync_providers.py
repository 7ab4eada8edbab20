import tempfile
import unittest
from pathlib import Path

from fakes import FakeFactory, FakeServerClient, language_query_key

from sonar_sync.errors import ProcessCanceledError
from sonar_sync.io import read_json
from sonar_sync.progress import ProgressIndicator
from sonar_sync.providers import build_sync_context
from sonar_sync.sync import sync
from sonar_sync.types import Resource, Rule, ServerSettings, Violation


def _client() -> FakeServerClient:
    return FakeServerClient(
        resources={language_query_key("proj:A"): [Resource(id=1, key="proj:A", language="java")]},
        rules={"java": [Rule(key="java:S100", language="java"), Rule(key="java:S200", language="java")]},
        violations={"proj:A": [
            Violation(id=1, severity="BLOCKER", rule_key="java:S100", resource_key="proj:A:Foo.java"),
            Violation(id=2, severity="minor", rule_key="java:S200", resource_key="proj:A:Bar.java"),
            Violation(id=3, severity="MAJOR", rule_key="java:S200", resource_key="proj:A:Bar.java"),
        ]},
    )


class TestDefaultProviders(unittest.TestCase):
    def test_sync_writes_snapshots_and_reports_counts(self) -> None:
        factory = FakeFactory({"http://h": _client()})
        settings = [ServerSettings(host="http://h", resource="proj:A"), ServerSettings(host="http://h", resource="")]

        with tempfile.TemporaryDirectory() as td:
            out = Path(td) / "snap"
            context = build_sync_context("app", settings, out, factory)

            result = sync(context, ProgressIndicator())

            self.assertEqual(3, result.violations_count)
            self.assertEqual(2, result.rules_count)

            violations = read_json(out / "violations.json")
            self.assertEqual(3, violations["violation_count"])
            self.assertEqual(["proj:A"], list(violations["violations"].keys()))
            self.assertEqual({"BLOCKER": 1, "MAJOR": 1, "MINOR": 1}, violations["by_severity"])
            self.assertEqual(
                {"ERROR": 1, "GENERIC_ERROR_OR_WARNING": 1, "WEAK_WARNING": 1},
                violations["by_highlight"],
            )

            rules = read_json(out / "rules.json")
            self.assertEqual(["java:S100", "java:S200"], [r["key"] for r in rules["rules"]])
            self.assertEqual([], list(out.glob("*.tmp")))

    def test_cancelled_sync_writes_nothing(self) -> None:
        factory = FakeFactory({"http://h": _client()})
        indicator = ProgressIndicator()
        indicator.cancel()

        with tempfile.TemporaryDirectory() as td:
            out = Path(td)
            context = build_sync_context("app", [ServerSettings(host="http://h", resource="proj:A")], out, factory)
            with self.assertRaises(ProcessCanceledError):
                sync(context, indicator)
            self.assertFalse((out / "violations.json").exists())
            self.assertFalse((out / "rules.json").exists())


if __name__ == "__main__":
    unittest.main()

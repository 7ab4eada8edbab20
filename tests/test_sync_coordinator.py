import unittest
from unittest.mock import MagicMock

from sonar_sync.errors import ProcessCanceledError
from sonar_sync.progress import ProgressIndicator
from sonar_sync.sync import ISSUES_PROVIDER, RULES_PROVIDER, SyncContext, sync


class TestSync(unittest.TestCase):
    def test_counts_from_both_providers(self) -> None:
        issues = MagicMock()
        issues.sync_with_sonar.return_value = 12
        rules = MagicMock()
        rules.sync_with_sonar.return_value = 340
        context = SyncContext(name="app", services={ISSUES_PROVIDER: issues, RULES_PROVIDER: rules})
        indicator = ProgressIndicator()

        result = sync(context, indicator)

        self.assertEqual(12, result.violations_count)
        self.assertEqual(340, result.rules_count)
        issues.sync_with_sonar.assert_called_once_with(context, indicator)
        rules.sync_with_sonar.assert_called_once_with(context, indicator)

    def test_missing_providers_leave_zero(self) -> None:
        result = sync(SyncContext(name="empty"), ProgressIndicator())
        self.assertEqual(0, result.violations_count)
        self.assertEqual(0, result.rules_count)

        rules = MagicMock()
        rules.sync_with_sonar.return_value = 3
        result = sync(SyncContext(name="rules-only", services={RULES_PROVIDER: rules}), ProgressIndicator())
        self.assertEqual(0, result.violations_count)
        self.assertEqual(3, result.rules_count)

    def test_each_pass_starts_from_zero(self) -> None:
        issues = MagicMock()
        issues.sync_with_sonar.side_effect = [5, 2]
        context = SyncContext(name="app", services={ISSUES_PROVIDER: issues})

        self.assertEqual(5, sync(context, ProgressIndicator()).violations_count)
        self.assertEqual(2, sync(context, ProgressIndicator()).violations_count)

    def test_cancellation_propagates_and_stops_the_pass(self) -> None:
        issues = MagicMock()
        issues.sync_with_sonar.side_effect = ProcessCanceledError("canceled")
        rules = MagicMock()
        context = SyncContext(name="app", services={ISSUES_PROVIDER: issues, RULES_PROVIDER: rules})

        with self.assertRaises(ProcessCanceledError):
            sync(context, ProgressIndicator())
        rules.sync_with_sonar.assert_not_called()


if __name__ == "__main__":
    unittest.main()

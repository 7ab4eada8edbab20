import unittest

from fakes import FakeServerClient

from sonar_sync.resources import get_all_modules, list_all_projects_and_modules
from sonar_sync.types import QUALIFIER_MODULE, QUALIFIER_PROJECT, Resource

PROJECTS_KEY = (None, (QUALIFIER_PROJECT,), ())


def _modules_key(project_id: int):
    return (project_id, (QUALIFIER_MODULE,), ())


def _project(i: int) -> Resource:
    return Resource(id=i, key=f"p{i}", qualifier=QUALIFIER_PROJECT)


def _module(i: int) -> Resource:
    return Resource(id=i, key=f"m{i}", qualifier=QUALIFIER_MODULE)


class TestResourceTraversal(unittest.TestCase):
    def test_each_project_is_followed_by_its_modules(self) -> None:
        client = FakeServerClient(resources={
            PROJECTS_KEY: [_project(1), _project(2), _project(3)],
            _modules_key(1): [_module(11), _module(12)],
            _modules_key(3): [_module(31)],
        })

        keys = [r.key for r in list_all_projects_and_modules(client)]

        self.assertEqual(["p1", "m11", "m12", "p2", "p3", "m31"], keys)

    def test_module_query_is_unlimited_depth(self) -> None:
        client = FakeServerClient(resources={PROJECTS_KEY: [_project(1)]})
        list_all_projects_and_modules(client)

        module_query = client.calls[1]
        self.assertEqual(1, module_query.resource)
        self.assertEqual(-1, module_query.depth)
        self.assertEqual((QUALIFIER_MODULE,), module_query.qualifiers)

    def test_no_projects_is_empty(self) -> None:
        self.assertEqual([], list_all_projects_and_modules(FakeServerClient()))
        self.assertEqual(
            [], list_all_projects_and_modules(FakeServerClient(resources={PROJECTS_KEY: []}))
        )

    def test_modules_are_not_requeried(self) -> None:
        client = FakeServerClient(resources={
            PROJECTS_KEY: [_project(1)],
            _modules_key(1): [_module(11)],
            _modules_key(11): [_module(111)],
        })
        keys = [r.key for r in list_all_projects_and_modules(client)]
        self.assertEqual(["p1", "m11"], keys)
        self.assertEqual(2, len(client.calls))

    def test_project_without_id_has_no_modules(self) -> None:
        self.assertEqual([], get_all_modules(FakeServerClient(), None))


if __name__ == "__main__":
    unittest.main()

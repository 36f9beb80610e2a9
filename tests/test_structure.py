"""
Structure lint tests.
Verify that the component skeleton exists and follows conventions.
"""

from tests.helpers import PROJECT_ROOT

PACKAGE = PROJECT_ROOT / "catalog_forms"


class TestProjectStructure:
    """Layout conventions for the catalog_forms package."""

    def test_core_directories_exist(self) -> None:
        assert (PACKAGE / "core").is_dir()
        assert (PACKAGE / "ports").is_dir()
        assert (PACKAGE / "adapters").is_dir()
        assert (PACKAGE / "rules").is_dir()

    def test_components_follow_atomic_layout(self) -> None:
        components = [
            d for d in (PACKAGE / "components").iterdir()
            if d.is_dir() and not d.name.startswith("_")
        ]
        assert components, "at least one component expected"
        for component in components:
            for module in ("__init__.py", "models.py", "ports.py", "component.py"):
                assert (component / module).is_file(), f"{component.name} missing {module}"
            assert (component / "tests").is_dir()

    def test_rules_file_exists(self) -> None:
        assert (PROJECT_ROOT / "rules.yaml").is_file()

    def test_tests_structure_exists(self) -> None:
        assert (PROJECT_ROOT / "tests" / "unit").is_dir()

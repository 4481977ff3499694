"""Unit tests for the DeclarationsProcessor class."""

from pathlib import Path

import pytest
from _pytest.logging import LogCaptureFixture

from jira_ops_manager.processing.exceptions import DeclarationProcessingError
from jira_ops_manager.processing.yaml_processor import DeclarationsProcessor
from jira_ops_manager.schemas.declarations import DeclarationsYAMLModel

VALID_YAML = """
data:
  - type: atlassian_jira_status
    name: todo
    config:
      id: "10000"
resources:
  - type: atlassian_jira_project
    name: main
    config:
      key: TES
      name: Test Project
      project_type_key: software
"""

YAML_UNKNOWN_KEY = """
projects:
  - name: Should not load
resources: []
"""

YAML_INVALID_ENTRY = """
resources:
  - type: atlassian_jira_project
    name: valid
  - 12345
"""

YAML_VALIDATION_ERROR = """
resources:
  - type: atlassian_jira_project
    name: valid
  - type: atlassian_jira_project
"""

YAML_SECTION_NOT_LIST = """
data:
  type: atlassian_jira_status
"""

YAML_DUPLICATE = """
resources:
  - type: atlassian_jira_project
    name: main
    config:
      key: DUP
      name: Duplicate
"""


def write_yaml(tmp_path: Path, content: str, name: str = "declarations.yaml") -> str:
    """Write YAML content to a file under tmp_path and return its path."""
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return str(path)


def test_load_valid_yaml(tmp_path: Path) -> None:
    """Test loading a valid YAML file with data sources and resources."""
    processor = DeclarationsProcessor()
    model = processor.load_declarations_model([write_yaml(tmp_path, VALID_YAML)])
    assert isinstance(model, DeclarationsYAMLModel)
    assert [declaration.address for declaration in model.data] == ["atlassian_jira_status.todo"]
    assert model.data[0].config == {"id": "10000"}
    assert len(model.resources) == 1
    assert model.resources[0].address == "atlassian_jira_project.main"
    assert model.resources[0].config["key"] == "TES"


def test_unknown_top_level_key_logged_and_ignored(tmp_path: Path, caplog: LogCaptureFixture) -> None:
    """Test that unknown top-level keys are logged and ignored."""
    processor = DeclarationsProcessor()
    model = processor.load_declarations_model([write_yaml(tmp_path, YAML_UNKNOWN_KEY)])
    assert model.data == []
    assert model.resources == []
    assert any("Unknown top-level keys will be ignored" in r for r in caplog.text.splitlines())


def test_invalid_entry(tmp_path: Path) -> None:
    """Test that non-dict entries are skipped and reported."""
    processor = DeclarationsProcessor(raise_on_error=False)
    model = processor.load_declarations_model([write_yaml(tmp_path, YAML_INVALID_ENTRY)])
    assert [declaration.name for declaration in model.resources] == ["valid"]
    assert model.resources[0].config == {}


def test_validation_error(tmp_path: Path, caplog: LogCaptureFixture) -> None:
    """Test that validation errors are logged and invalid declarations are skipped."""
    processor = DeclarationsProcessor(raise_on_error=False)
    model = processor.load_declarations_model([write_yaml(tmp_path, YAML_VALIDATION_ERROR)])
    assert [declaration.name for declaration in model.resources] == ["valid"]
    assert any("Validation error for declaration" in r for r in caplog.text.splitlines())


def test_errors_raised(tmp_path: Path) -> None:
    """Test that collected errors are raised together by default."""
    processor = DeclarationsProcessor()
    with pytest.raises(DeclarationProcessingError) as exc_info:
        processor.load_declarations_model([write_yaml(tmp_path, YAML_INVALID_ENTRY), write_yaml(tmp_path, YAML_SECTION_NOT_LIST, "data.yaml")])
    errors = exc_info.value.errors
    assert len(errors) == 2
    assert errors[0]["error"] == "Declaration entry is not a dict"
    assert errors[1]["error"] == "Section is not a list"


def test_duplicate_address_across_files(tmp_path: Path) -> None:
    """Test that the same address declared in two files is rejected and the first one kept."""
    processor = DeclarationsProcessor(raise_on_error=False)
    model = processor.load_declarations_model([write_yaml(tmp_path, VALID_YAML), write_yaml(tmp_path, YAML_DUPLICATE, "more.yaml")])
    assert len(model.resources) == 1
    assert model.resources[0].config["key"] == "TES"


def test_malformed_yaml(tmp_path: Path) -> None:
    """Test that unparsable files are reported."""
    processor = DeclarationsProcessor()
    with pytest.raises(DeclarationProcessingError) as exc_info:
        processor.load_declarations_model([write_yaml(tmp_path, "not: [valid: yaml")])
    assert exc_info.value.errors[0]["file"].endswith("declarations.yaml")


def test_yaml_not_a_dict(tmp_path: Path) -> None:
    """Test that a file holding a list at the top level is reported."""
    processor = DeclarationsProcessor()
    with pytest.raises(DeclarationProcessingError) as exc_info:
        processor.load_declarations_model([write_yaml(tmp_path, "- a\n- b\n")])
    assert exc_info.value.errors == [{"file": str(tmp_path / "declarations.yaml"), "error": "YAML file is not a dictionary"}]

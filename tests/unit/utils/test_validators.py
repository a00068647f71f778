import pytest

from src.utils.exceptions import ValidationError
from src.utils.validators import (
    validate_entity_name,
    validate_file_path,
    validate_max_depth,
)


def test_validate_file_path(metadata_file) -> None:
    assert validate_file_path(str(metadata_file)) == metadata_file
    with pytest.raises(ValidationError):
        validate_file_path(str(metadata_file.parent / "missing.edmx"))
    assert validate_file_path("missing.edmx", must_exist=False).name == "missing.edmx"


@pytest.mark.parametrize("depth", [0, 1, 10])
def test_validate_max_depth_accepts(depth) -> None:
    assert validate_max_depth(depth) == depth


@pytest.mark.parametrize("depth", [-1, True, 2.5, "3"])
def test_validate_max_depth_rejects(depth) -> None:
    with pytest.raises(ValidationError):
        validate_max_depth(depth)


def test_validate_entity_name() -> None:
    assert validate_entity_name("  Customer ") == "Customer"
    with pytest.raises(ValidationError):
        validate_entity_name("   ")

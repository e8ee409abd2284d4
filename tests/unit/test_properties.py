"""Property-based tests using hypothesis."""

import re

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from pydantic import ValidationError

from src.projectdesk.core.file_types import SIZE_UNITS, classify, format_size
from src.projectdesk.models import AttachmentCategory
from src.projectdesk.schemas import ProjectCreate
from src.projectdesk.services import storage_name

pytestmark = pytest.mark.unit

FORMATTED_SIZE = re.compile(r"^(\d+(?:\.\d{1,2})?) (Bytes|KB|MB|GB)$")
STORAGE_NAME = re.compile(r"files-[0-9]+-[0-9]+(\.[A-Za-z0-9]{1,16})?")


@given(num_bytes=st.integers(min_value=1, max_value=2**50))
@settings(max_examples=200)
def test_format_size_shape(num_bytes: int):
    """Every positive size renders as a short number and a known unit."""
    match = FORMATTED_SIZE.match(format_size(num_bytes))
    assert match is not None

    value, unit = float(match.group(1)), match.group(2)
    index = SIZE_UNITS.index(unit)
    assert abs(value * 1024**index - num_bytes) <= 0.005 * 1024**index
    if unit != "GB":
        assert value <= 1024


@given(num_bytes=st.integers(min_value=0, max_value=1023))
def test_format_size_small_values_are_bytes(num_bytes: int):
    assert format_size(num_bytes) == f"{num_bytes} Bytes"


@given(mimetype=st.text(max_size=80))
def test_classify_is_total(mimetype: str):
    assert isinstance(classify(mimetype), AttachmentCategory)


@given(subtype=st.from_regex(r"^[a-z0-9.+-]{1,30}$", fullmatch=True))
def test_images_always_classified_as_image(subtype: str):
    assert classify(f"image/{subtype}") == AttachmentCategory.IMAGE


@given(original=st.text(max_size=120))
@settings(max_examples=200)
def test_storage_name_is_always_safe(original: str):
    """Whatever the client sends, the storage name is a plain safe basename."""
    name = storage_name(original)

    assert STORAGE_NAME.fullmatch(name)
    assert "/" not in name
    assert "\\" not in name


@given(title=st.text(alphabet=" \t\n\r", min_size=1, max_size=20))
def test_whitespace_titles_rejected(title: str):
    with pytest.raises(ValidationError):
        ProjectCreate(title=title)

"""Tests for attachment statistics."""

from datetime import timedelta
from uuid import uuid4

import pytest

from src.projectdesk.models import AttachmentCategory
from src.projectdesk.services import summarize_attachments
from tests.factories import AttachmentFactory, utc_now

pytestmark = pytest.mark.unit


def test_empty():
    stats = summarize_attachments([])

    assert stats.total_files == 0
    assert stats.total_size == 0
    assert stats.formatted_total_size == "0 Bytes"
    assert stats.categories == {}
    assert stats.recent_files == []


def test_category_totals():
    project_id = uuid4()
    attachments = [
        AttachmentFactory.build(project_id=project_id, size=1024),
        AttachmentFactory.build(project_id=project_id, size=512),
        AttachmentFactory.image(project_id=project_id, size=2048),
    ]

    stats = summarize_attachments(attachments)

    assert stats.total_files == 3
    assert stats.total_size == 3584
    assert stats.formatted_total_size == "3.5 KB"
    pdf = stats.categories[AttachmentCategory.PDF]
    assert (pdf.count, pdf.total_size, pdf.formatted_size) == (2, 1536, "1.5 KB")
    image = stats.categories[AttachmentCategory.IMAGE]
    assert (image.count, image.total_size, image.formatted_size) == (1, 2048, "2 KB")
    assert AttachmentCategory.DOCUMENT not in stats.categories


def test_category_totals_match_overall_total():
    attachments = [
        AttachmentFactory.build(project_id=uuid4(), size=size) for size in (1, 10, 100, 1000)
    ]

    stats = summarize_attachments(attachments)

    assert sum(c.total_size for c in stats.categories.values()) == stats.total_size
    assert sum(c.count for c in stats.categories.values()) == stats.total_files


def test_recent_files_newest_first():
    now = utc_now()
    attachments = [
        AttachmentFactory.build(
            project_id=uuid4(),
            original_name=f"{i}.pdf",
            uploaded_at=now + timedelta(minutes=i),
        )
        for i in range(8)
    ]

    stats = summarize_attachments(attachments)

    assert [f.original_name for f in stats.recent_files] == [
        "7.pdf",
        "6.pdf",
        "5.pdf",
        "4.pdf",
        "3.pdf",
    ]


def test_recent_files_custom_limit():
    attachments = [AttachmentFactory.build(project_id=uuid4()) for _ in range(4)]

    assert len(summarize_attachments(attachments, recent_limit=2).recent_files) == 2


def test_serialized_in_camel_case():
    stats = summarize_attachments([AttachmentFactory.build(project_id=uuid4(), size=100)])

    data = stats.model_dump(mode="json", by_alias=True)

    assert data["formattedTotalSize"] == "100 Bytes"
    assert data["categories"]["pdf"] == {
        "count": 1,
        "totalSize": 100,
        "formattedSize": "100 Bytes",
    }
    assert set(data["recentFiles"][0]) == {
        "filename",
        "originalName",
        "category",
        "uploadedAt",
        "formattedSize",
    }

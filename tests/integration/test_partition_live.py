"""Live partition calls against a running partition service."""

import io
import os

import pytest
from pypdf import PdfWriter

from docpart.client import PartitionClient

pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_DOCPART_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_DOCPART_NETWORK_TESTS=1 to run",
)


def blank_pdf(pages: int) -> bytes:
    writer = PdfWriter()
    for _ in range(pages):
        writer.add_blank_page(width=612, height=792)
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


@pytest.mark.asyncio
async def test_split_and_unsplit_partition_agree(server_url, api_key):
    content = blank_pdf(3)
    async with PartitionClient(server_url=server_url, api_key=api_key) as client:
        split = await client.partition("blank.pdf", content, split_pdf_page=True)
        whole = await client.partition("blank.pdf", content, split_pdf_page=False)

    assert split.status_code == 200
    assert whole.status_code == 200
    assert len(split.elements or []) == len(whole.elements or [])

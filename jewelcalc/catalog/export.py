"""CSV export of catalog tables.

Streams rows so large catalogs never sit in memory as one string.
"""

from __future__ import annotations

import csv
from io import StringIO
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy import select

from jewelcalc.db.models import MetalModel

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

METAL_HEADERS = [
    "id",
    "name",
    "purity",
    "color",
    "price_per_gram",
    "is_alloy",
    "description",
]


async def export_metals_csv(session: AsyncSession) -> AsyncGenerator[str, None]:
    """Generate CSV stream of all metals.

    Yields:
        CSV rows as strings (header first)
    """
    output = StringIO()
    writer = csv.writer(output)

    writer.writerow(METAL_HEADERS)
    yield output.getvalue()
    output.seek(0)
    output.truncate(0)

    result = await session.stream_scalars(select(MetalModel).order_by(MetalModel.id))
    async for metal in result:
        writer.writerow(
            [
                metal.id,
                metal.name,
                metal.purity or "",
                metal.color or "",
                f"{metal.price_per_gram:.2f}",
                str(metal.is_alloy).lower(),
                metal.description or "",
            ]
        )
        yield output.getvalue()
        output.seek(0)
        output.truncate(0)

"""Feed pipeline — URL → Fetch → Flatten, fanned out per worksheet.

Components:
- get_cells: one worksheet's cells feed
- get_worksheets: every worksheet of a spreadsheet, in listed order
"""

from sheetfeed.pipeline.aggregator import (
    gather_ordered,
    get_cells,
    get_worksheets,
    worksheet,
    worksheets,
)

__all__ = ["gather_ordered", "get_cells", "get_worksheets", "worksheet", "worksheets"]

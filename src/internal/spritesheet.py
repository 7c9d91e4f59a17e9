import logging
from pathlib import Path
from typing import List

import pygame as pg


logger = logging.getLogger(__name__)


class Spritesheet:
    """Spritesheet class for slicing equally sized frames out of one image.

    Example::

        logging.basicConfig(level=logging.DEBUG)
        spritesheet = Spritesheet(sheet_path=Path("src")/"data"/"images"/"pacman.png")
        frames = spritesheet.load_grid((30, 30), columns=3, rows=1)
    """

    def __init__(self, sheet_path: Path) -> None:
        self.sheet_path = sheet_path
        self.spritesheet: pg.SurfaceType = self.load_spritesheet()

    def load_spritesheet(self) -> pg.SurfaceType:
        """Load the spritesheet image keeping its per pixel alpha.

        Returns:
            pg.SurfaceType: The loaded spritesheet image.
        """
        try:
            img = pg.image.load(self.sheet_path)
        except (pg.error, FileNotFoundError) as e:
            logger.error(f"error loading spritesheet: {e}")
            raise
        # convert needs a display mode, headless callers get the raw image
        return img.convert_alpha() if pg.display.get_surface() is not None else img

    def load_grid(self, cell_size: tuple[int, int], columns: int, rows: int = 1) -> List[pg.SurfaceType]:
        """Slice the sheet row by row into `columns * rows` frames.

        Args:
            cell_size (tuple[int, int]): Width and height of one frame.
            columns (int): Frames per row.
            rows (int): Number of rows.

        Returns:
            list[pg.SurfaceType]: Subsurfaces sharing pixels with the sheet.

        Raises:
            ValueError: If the grid does not fit inside the sheet.
        """
        w, h = cell_size
        sheet_w, sheet_h = self.spritesheet.get_size()
        if columns * w > sheet_w or rows * h > sheet_h:
            msg = f"grid {columns}x{rows} of {w}x{h} does not fit sheet {sheet_w}x{sheet_h}"
            logger.error(f"error loading sprites: {msg}")
            raise ValueError(msg)
        return [
            self.spritesheet.subsurface(pg.Rect(col * w, row * h, w, h))
            for row in range(rows)
            for col in range(columns)
        ]

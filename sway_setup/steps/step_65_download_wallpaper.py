from __future__ import annotations

import logging

from ..context import ProvisionContext
from ..lib.net import download

logger = logging.getLogger(__name__)


class DownloadWallpaperStep:
    step_id = "65_download_wallpaper"
    description = "Download wallpaper"
    critical = False

    def is_satisfied(self, ctx: ProvisionContext) -> bool:
        p = ctx.wallpaper_path
        return p.is_file() and p.stat().st_size > 0

    def run(self, ctx: ProvisionContext) -> None:
        download(ctx.config.wallpaper_url, ctx.wallpaper_path, dry_run=ctx.dry_run)

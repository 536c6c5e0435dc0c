"""Tests for config backup, the backup manifest and the backup step."""

from __future__ import annotations

from pathlib import Path

import yaml

from sway_setup.lib.backup import (
    MANIFEST_NAME,
    BackupManifest,
    backup_directories,
    copy_tree,
    write_manifest,
)
from sway_setup.lib.templates import user_files
from sway_setup.steps import BackupConfigsStep


def _seed(home: Path, rel: str, text: str) -> Path:
    p = home / ".config" / rel
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")
    return p


class TestBackupDirectories:
    def test_copies_only_existing_dirs(self, tmp_path: Path, home: Path) -> None:
        _seed(home, "sway/config", "mine")
        _seed(home, "sway/extra/colors", "purple")
        backup_dir = tmp_path / "backup"
        manifest = BackupManifest()

        copied = backup_directories(
            [home / ".config" / "sway", home / ".config" / "kitty"], backup_dir, manifest
        )

        assert copied == [home / ".config" / "sway"]
        assert (backup_dir / "sway" / "config").read_text(encoding="utf-8") == "mine"
        assert (backup_dir / "sway" / "extra" / "colors").read_text(encoding="utf-8") == "purple"
        assert manifest.entries == {str(home / ".config" / "sway"): str(backup_dir / "sway")}

    def test_nothing_to_copy_creates_no_dir(self, tmp_path: Path, home: Path) -> None:
        backup_dir = tmp_path / "backup"
        copied = backup_directories([home / ".config" / "sway"], backup_dir, BackupManifest())
        assert copied == []
        assert not backup_dir.exists()

    def test_dry_run_copies_nothing_but_records(self, tmp_path: Path, home: Path) -> None:
        _seed(home, "mako/config", "x")
        manifest = BackupManifest()
        backup_directories([home / ".config" / "mako"], tmp_path / "b", manifest, dry_run=True)
        assert not (tmp_path / "b").exists()
        assert len(manifest) == 1

    def test_copy_tree_keeps_symlinks(self, tmp_path: Path) -> None:
        src = tmp_path / "src"
        src.mkdir()
        (src / "real").write_text("r", encoding="utf-8")
        (src / "link").symlink_to("real")

        copy_tree(src, tmp_path / "dst")
        assert (tmp_path / "dst" / "link").is_symlink()
        assert (tmp_path / "dst" / "link").read_text(encoding="utf-8") == "r"

    def test_manifest_written_as_yaml(self, tmp_path: Path) -> None:
        manifest = BackupManifest()
        manifest.record(Path("/home/a/.config/sway"), tmp_path / "sway")
        p = write_manifest(tmp_path, manifest)

        assert p.name == MANIFEST_NAME
        assert yaml.safe_load(p.read_text(encoding="utf-8")) == {"/home/a/.config/sway": str(tmp_path / "sway")}


class TestBackupConfigsStep:
    def test_fresh_home_is_satisfied(self, ctx) -> None:
        assert BackupConfigsStep().is_satisfied(ctx)

    def test_differing_managed_file_needs_backup(self, ctx, home: Path) -> None:
        _seed(home, "sway/config", "# my own sway config\n")
        assert not BackupConfigsStep().is_satisfied(ctx)

    def test_managed_content_needs_no_backup(self, ctx, home: Path) -> None:
        for f in user_files(home):
            f.dest.parent.mkdir(parents=True, exist_ok=True)
            f.dest.write_text(f.content(), encoding="utf-8")
        _seed(home, "sway/my-extra-include", "kept as is")
        assert BackupConfigsStep().is_satisfied(ctx)

    def test_run_backs_up_and_writes_manifest(self, ctx, home: Path) -> None:
        _seed(home, "sway/config", "mine")
        _seed(home, "gtk-3.0/settings.ini", "[Settings]\n")
        BackupConfigsStep().run(ctx)

        assert ctx.backup_dir == home / ".config-backup-20260101-120000"
        assert (ctx.backup_dir / "sway" / "config").read_text(encoding="utf-8") == "mine"
        assert (ctx.backup_dir / "gtk-3.0" / "settings.ini").exists()
        manifest = yaml.safe_load((ctx.backup_dir / MANIFEST_NAME).read_text(encoding="utf-8"))
        assert set(manifest) == {str(home / ".config" / "sway"), str(home / ".config" / "gtk-3.0")}

    def test_backup_root_override(self, make_ctx, tmp_path: Path, home: Path) -> None:
        ctx = make_ctx(backup_root=tmp_path / "elsewhere")
        _seed(home, "kitty/kitty.conf", "font_size 20\n")
        BackupConfigsStep().run(ctx)
        assert (tmp_path / "elsewhere" / ".config-backup-20260101-120000" / "kitty" / "kitty.conf").exists()

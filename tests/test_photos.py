"""
Tests for progress photos: scheduling, downloads and cleanup.

Downloads go through a mocked requests session; nothing touches the network.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
import requests

from nutrition_seed.constants import PHOTO_SCHEDULE
from nutrition_seed.generators import (
    PhotoDownloader,
    PhotoDownloadError,
    ProgressPhotoGenerator,
    WeightGenerator,
    clear_seed_progress_photos,
)
from nutrition_seed.generators.progress_photos import nearest_weight, schedule_offset
from nutrition_seed.reporting import SeedReporter
from nutrition_seed.storage import SQLiteStorage


def fake_session(fail_for: str | None = None):
    """Session whose get() returns a tiny JPEG body, or raises for URLs containing fail_for."""
    session = MagicMock()

    def get(url, **kwargs):
        if fail_for and fail_for in url:
            raise requests.ConnectionError("connection refused")
        response = MagicMock()
        response.iter_content.return_value = [b"\xff\xd8", b"\xff\xd9"]
        return response

    session.get.side_effect = get
    return session


class TestSchedule:
    """Tests for fitting the schedule into the history window."""

    def test_full_window_unchanged(self):
        assert schedule_offset(90, 180) == 90
        assert schedule_offset(7, 90) == 7

    def test_short_window_compressed(self):
        assert schedule_offset(90, 30) == 30
        assert schedule_offset(45, 30) == 15
        assert schedule_offset(90, 0) == 0


class TestNearestWeight:
    """Tests for matching photo dates to weigh-ins."""

    def test_closest_date_wins(self):
        weigh_ins = [("2024-06-01", 85.0), ("2024-06-05", 84.6), ("2024-06-12", 84.1)]
        assert nearest_weight(weigh_ins, "2024-06-06") == 84.6
        assert nearest_weight(weigh_ins, "2024-06-30") == 84.1

    def test_tie_prefers_earlier(self):
        assert nearest_weight([("2024-06-01", 85.0), ("2024-06-03", 84.8)], "2024-06-02") == 85.0

    def test_no_weigh_ins(self):
        assert nearest_weight([], "2024-06-02") is None


class TestProgressPhotoGenerator:
    """Tests for ProgressPhotoGenerator."""

    def test_remote_uris_without_download(self, storage, make_ctx):
        inserted = ProgressPhotoGenerator(make_ctx()).seed_progress_photos()

        rows = storage.query("SELECT id, local_uri, thumbnail_uri, date, timestamp FROM progress_photos")
        assert inserted == len(PHOTO_SCHEDULE) == len(rows)
        for row in rows:
            assert row["id"].startswith("seed-photo-")
            assert row["local_uri"].startswith("https://picsum.photos/id/")
            assert row["local_uri"].endswith("/800/1200")
            assert row["thumbnail_uri"].endswith("/200/300")
            assert "2024-05-16" <= row["date"] <= "2024-06-15"
        assert len({r["timestamp"] for r in rows}) == len(rows)

    def test_downloads_written_to_photo_dir(self, storage, make_ctx, tmp_path):
        ctx = make_ctx(download_photos=True, session=fake_session())
        inserted = ProgressPhotoGenerator(ctx).seed_progress_photos()

        assert inserted == len(PHOTO_SCHEDULE)
        files = sorted(p.name for p in (tmp_path / "photos").iterdir())
        assert len(files) == 2 * len(PHOTO_SCHEDULE)
        assert sum(name.startswith("thumb_") for name in files) == len(PHOTO_SCHEDULE)
        uris = [r["local_uri"] for r in storage.query("SELECT local_uri FROM progress_photos")]
        assert all(uri.startswith("file://") for uri in uris)

    def test_failed_download_skips_photo(self, storage, make_ctx):
        """One unreachable image costs one photo and one warning."""
        ctx = make_ctx(download_photos=True, session=fake_session(fail_for="/id/237/"))
        inserted = ProgressPhotoGenerator(ctx).seed_progress_photos()

        assert inserted == len(PHOTO_SCHEDULE) - 1
        assert len(ctx.reporter.warnings) == 1
        assert "connection refused" in ctx.reporter.warnings[0]

    def test_weight_follows_weigh_ins(self, storage, make_ctx):
        """Each photo carries the weight of the weigh-in nearest its date."""
        ctx = make_ctx()
        WeightGenerator(ctx).seed_weight_entries()
        ProgressPhotoGenerator(ctx).seed_progress_photos()

        weigh_ins = [
            (r["date"], r["weight_kg"])
            for r in storage.query("SELECT date, weight_kg FROM weight_entries ORDER BY date")
        ]
        photos = storage.query("SELECT date, weight_kg FROM progress_photos")
        assert photos
        for photo in photos:
            assert photo["weight_kg"] == nearest_weight(weigh_ins, photo["date"])
        scheduled = {entry["weight_kg"] for entry in PHOTO_SCHEDULE}
        assert not {p["weight_kg"] for p in photos} <= scheduled

    def test_schedule_weight_without_weigh_ins(self, storage, make_ctx):
        ProgressPhotoGenerator(make_ctx()).seed_progress_photos()
        weights = [r["weight_kg"] for r in storage.query("SELECT weight_kg FROM progress_photos ORDER BY id")]
        assert sorted(weights) == sorted(entry["weight_kg"] for entry in PHOTO_SCHEDULE)

    def test_comparisons_pair_oldest_with_newest(self, storage, make_ctx):
        gen = ProgressPhotoGenerator(make_ctx())
        gen.seed_progress_photos()
        inserted = gen.seed_photo_comparisons()

        assert inserted == 4
        dates = {r["id"]: r["date"] for r in storage.query("SELECT id, date FROM progress_photos")}
        pairs = storage.query("SELECT photo1_id, photo2_id, comparison_type FROM photo_comparisons")
        for pair in pairs:
            assert dates[pair["photo1_id"]] < dates[pair["photo2_id"]]
            assert pair["comparison_type"] == "side_by_side"

    def test_comparisons_need_two_photos(self, storage, make_ctx):
        assert ProgressPhotoGenerator(make_ctx()).seed_photo_comparisons() == 0


class TestPhotoDownloader:
    """Tests for PhotoDownloader."""

    def test_http_error_wrapped(self, tmp_path):
        session = MagicMock()
        session.get.return_value.raise_for_status.side_effect = requests.HTTPError("404 Not Found")
        downloader = PhotoDownloader(session, tmp_path)

        with pytest.raises(PhotoDownloadError, match="404"):
            downloader.download("https://picsum.photos/id/1/800/1200", "photo_1.jpg")

    def test_returns_file_uri(self, tmp_path):
        uri = PhotoDownloader(fake_session(), tmp_path).download("https://example.test/x", "photo_1.jpg")
        assert uri == (tmp_path / "photo_1.jpg").resolve().as_uri()
        assert (tmp_path / "photo_1.jpg").read_bytes() == b"\xff\xd8\xff\xd9"


class TestClearSeedProgressPhotos:
    """Tests for photo cleanup."""

    def test_removes_files_and_rows(self, storage, make_ctx, tmp_path):
        ctx = make_ctx(download_photos=True, session=fake_session())
        gen = ProgressPhotoGenerator(ctx)
        gen.seed_progress_photos()
        gen.seed_photo_comparisons()

        removed = clear_seed_progress_photos(storage)

        assert removed == len(PHOTO_SCHEDULE)
        assert list((tmp_path / "photos").iterdir()) == []
        assert storage.query("SELECT COUNT(*) AS n FROM progress_photos")[0]["n"] == 0
        assert storage.query("SELECT COUNT(*) AS n FROM photo_comparisons")[0]["n"] == 0

    def test_missing_files_tolerated(self, storage, make_ctx, tmp_path):
        ctx = make_ctx(download_photos=True, session=fake_session())
        ProgressPhotoGenerator(ctx).seed_progress_photos()
        first = next((tmp_path / "photos").iterdir())
        Path(first).unlink()

        reporter = SeedReporter()
        assert clear_seed_progress_photos(storage, reporter) == len(PHOTO_SCHEDULE)
        assert reporter.warnings == []

    def test_remote_uris_left_alone(self, storage, make_ctx):
        ProgressPhotoGenerator(make_ctx()).seed_progress_photos()
        assert clear_seed_progress_photos(storage) == len(PHOTO_SCHEDULE)

    def test_user_photos_kept(self, storage):
        storage.execute(
            "INSERT INTO progress_photos (id, local_uri, date, timestamp, category) VALUES (?, ?, ?, ?, ?)",
            ["photo-user-1", "file:///nowhere/user.jpg", "2024-06-01", 1, "front"],
        )
        clear_seed_progress_photos(storage)
        assert storage.query("SELECT id FROM progress_photos") == [{"id": "photo-user-1"}]

    def test_missing_table_is_warning(self):
        reporter = SeedReporter()
        assert clear_seed_progress_photos(SQLiteStorage(), reporter) == 0
        assert len(reporter.warnings) == 1

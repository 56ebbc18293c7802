"""
Progress photos and comparisons.

Tables generated:
- progress_photos: the 12-photo schedule from constants.photos, rescaled
  into the history window
- photo_comparisons: oldest/newest side-by-side pairs

Images are downloaded from picsum.photos with requests (full size plus a
thumbnail) into the photo directory. With downloads disabled the remote
URLs are stored as-is. Every seeded photo id carries the ``seed-photo``
prefix so clear_seed_progress_photos can find and remove it later.

Each photo carries the weight of the weigh-in nearest its date; the
schedule's own weights are used only when no weigh-ins exist.
"""

from datetime import date, datetime, timezone
from pathlib import Path
from urllib.parse import unquote, urlparse

import requests

from ..constants import (
    FULL_IMAGE_URL,
    MAX_COMPARISONS,
    PHOTO_SCHEDULE,
    SCHEDULE_SPAN_DAYS,
    SEED_IMAGES,
    SEED_PHOTO_PREFIX,
    THUMBNAIL_URL,
)
from ..reporting import SeedReporter
from ..storage import Storage, StorageError
from .base import BaseSeedGenerator

DOWNLOAD_TIMEOUT = 30
CHUNK_SIZE = 8192

PHOTO_COLUMNS = [
    "id", "local_uri", "thumbnail_uri", "date", "timestamp", "category",
    "notes", "weight_kg", "is_private", "created_at", "updated_at",
]


class PhotoDownloadError(Exception):
    """Raised when a seed photo or its thumbnail cannot be fetched or written."""

    pass


class PhotoDownloader:
    """
    Fetch images over HTTP into a local directory.

    Example:
        downloader = PhotoDownloader(requests.Session(), "progress-photos")
        uri = downloader.download("https://picsum.photos/id/237/800/1200", "photo_1.jpg")
    """

    def __init__(self, session: requests.Session, photo_dir: str | Path):
        self.session = session
        self.photo_dir = Path(photo_dir)

    def download(self, url: str, filename: str) -> str:
        """Download ``url`` to ``photo_dir/filename`` and return its file:// URI."""
        destination = self.photo_dir / filename
        try:
            self.photo_dir.mkdir(parents=True, exist_ok=True)
            response = self.session.get(url, stream=True, timeout=DOWNLOAD_TIMEOUT)
            response.raise_for_status()
            with open(destination, "wb") as f:
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                    if chunk:
                        f.write(chunk)
        except (requests.RequestException, OSError) as e:
            raise PhotoDownloadError(f"{url}: {e}") from e
        return destination.resolve().as_uri()


def schedule_offset(days_ago: int, total_days: int) -> int:
    """Map a schedule day (0-90) into a window of ``total_days`` days."""
    if total_days >= SCHEDULE_SPAN_DAYS:
        return days_ago
    return round(days_ago * total_days / SCHEDULE_SPAN_DAYS)


def photo_timestamp(day: str, index: int) -> int:
    """Epoch milliseconds at noon UTC on ``day``, offset by index to stay unique."""
    noon = datetime.fromisoformat(day).replace(hour=12, tzinfo=timezone.utc)
    return int(noon.timestamp() * 1000) + index


def nearest_weight(weigh_ins: list[tuple[str, float]], day: str) -> float | None:
    """Weight of the weigh-in closest to ``day`` (earlier wins a tie), or None."""
    if not weigh_ins:
        return None
    target = date.fromisoformat(day)
    _, weight = min(
        weigh_ins,
        key=lambda entry: (abs((date.fromisoformat(entry[0]) - target).days), entry[0]),
    )
    return weight


class ProgressPhotoGenerator(BaseSeedGenerator):
    """Generate progress photos and comparison pairs."""

    def seed_progress_photos(self) -> int:
        """
        Insert the photo schedule.

        A photo whose download fails is reported as a warning and left out;
        the remaining photos are still inserted.
        """
        downloader = None
        owned_session = None
        if self.ctx.download_photos:
            session = self.ctx.session
            if session is None:
                session = owned_session = requests.Session()
            downloader = PhotoDownloader(session, self.ctx.photo_dir)

        weigh_ins = [
            (row["date"], float(row["weight_kg"]))
            for row in self.storage.query(
                "SELECT date, weight_kg FROM weight_entries WHERE date >= ? ORDER BY date",
                [self.ctx.day(self.ctx.total_days)],
            )
        ]

        now = self.ctx.now_str
        rows = []
        try:
            for index, entry in enumerate(PHOTO_SCHEDULE):
                image = SEED_IMAGES[entry["image_index"]]
                day = self.ctx.day(schedule_offset(entry["days_ago"], self.ctx.total_days))
                timestamp = photo_timestamp(day, index)
                full_url = FULL_IMAGE_URL.format(image_id=image["image_id"])
                thumb_url = THUMBNAIL_URL.format(image_id=image["image_id"])
                weight_kg = nearest_weight(weigh_ins, day)
                if weight_kg is None:
                    weight_kg = entry["weight_kg"]

                if downloader is None:
                    local_uri, thumbnail_uri = full_url, thumb_url
                else:
                    try:
                        local_uri = downloader.download(full_url, f"photo_{timestamp}.jpg")
                        thumbnail_uri = downloader.download(thumb_url, f"thumb_{timestamp}.jpg")
                    except PhotoDownloadError as e:
                        self.reporter.warning(f"Failed to download seed photo {index}: {e}", table="progress_photos")
                        continue

                rows.append([
                    f"{SEED_PHOTO_PREFIX}-{index}",
                    local_uri,
                    thumbnail_uri,
                    day,
                    timestamp,
                    image["category"],
                    entry["notes"],
                    weight_kg,
                    int(entry["is_private"]),
                    now,
                    now,
                ])
        finally:
            if owned_session is not None:
                owned_session.close()

        return self._insert("progress_photos", PHOTO_COLUMNS, rows, "progress photos")

    def seed_photo_comparisons(self) -> int:
        """Pair the oldest photos with the newest: (0, n-1), (1, n-2), ..."""
        photos = self.storage.query(
            "SELECT id FROM progress_photos WHERE id LIKE ? ORDER BY date ASC, timestamp ASC",
            [f"{SEED_PHOTO_PREFIX}%"],
        )
        pair_count = min(MAX_COMPARISONS, len(photos) // 2)

        now = self.ctx.now_str
        rows = []
        for i in range(pair_count):
            older = photos[i]["id"]
            newer = photos[len(photos) - 1 - i]["id"]
            rows.append([f"{SEED_PHOTO_PREFIX}-cmp-{i}", older, newer, "side_by_side", now])

        return self._insert(
            "photo_comparisons",
            ["id", "photo1_id", "photo2_id", "comparison_type", "created_at"],
            rows,
            "photo comparisons",
        )


def _remove_local_file(uri: str | None) -> None:
    if not uri:
        return
    parsed = urlparse(uri)
    if parsed.scheme in ("http", "https"):
        return
    path = Path(unquote(parsed.path)) if parsed.scheme == "file" else Path(uri)
    path.unlink(missing_ok=True)


def clear_seed_progress_photos(storage: Storage, reporter: SeedReporter | None = None) -> int:
    """
    Remove seeded photos: local image files first, then comparison and photo rows.

    Missing files are ignored and remote URIs are left alone. Returns the
    number of photo rows found.
    """
    reporter = reporter or SeedReporter()
    pattern = f"{SEED_PHOTO_PREFIX}%"
    try:
        photos = storage.query(
            "SELECT id, local_uri, thumbnail_uri FROM progress_photos WHERE id LIKE ?",
            [pattern],
        )
    except StorageError as e:
        reporter.warning(f"Could not clear seed progress photos: {e}", table="progress_photos")
        return 0

    for photo in photos:
        for uri in (photo["local_uri"], photo["thumbnail_uri"]):
            try:
                _remove_local_file(uri)
            except OSError as e:
                reporter.warning(f"Could not delete photo file {uri}: {e}", table="progress_photos")

    try:
        storage.execute(
            "DELETE FROM photo_comparisons WHERE photo1_id LIKE ? OR photo2_id LIKE ? OR id LIKE ?",
            [pattern, pattern, pattern],
        )
        storage.execute("DELETE FROM progress_photos WHERE id LIKE ?", [pattern])
    except StorageError as e:
        reporter.warning(f"Could not clear seed progress photos: {e}", table="progress_photos")

    if photos:
        reporter.info(f"[clear] Removed {len(photos)} seed progress photos", table="progress_photos")
    return len(photos)

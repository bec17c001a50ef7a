"""Loading images from local paths or http(s) URLs."""
import io

import httpx
from PIL import Image

MAX_DOWNLOAD_BYTES = 50 * 1024 * 1024


class ImageLoadError(Exception):
    def __init__(self, source, cause):
        self.source = source
        self.cause = cause
        super().__init__(self.describe())

    def describe(self):
        return f"{self.source}: {self.cause}"


class SourceUnreachable(ImageLoadError):
    def describe(self):
        return f"Failed to fetch URL '{self.source}': {self.cause}"


class SourceUnreadable(ImageLoadError):
    def describe(self):
        return f"Failed to open image '{self.source}': {self.cause}"


class DecodeFailed(ImageLoadError):
    def describe(self):
        return f"Failed to decode image '{self.source}': {self.cause}"


def is_url(source):
    return source.startswith(("http://", "https://"))


def fetch(url, client=None, limit=MAX_DOWNLOAD_BYTES):
    """Download url, silently truncating the body after `limit` bytes."""
    owned = client is None
    if owned:
        client = httpx.Client()

    data = bytearray()
    try:
        with client.stream("GET", url, follow_redirects=True) as response:
            response.raise_for_status()
            for chunk in response.iter_bytes():
                data += chunk[:limit - len(data)]
                if len(data) >= limit:
                    break
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise SourceUnreachable(url, e) from e
    finally:
        if owned:
            client.close()

    return bytes(data)


def read_file(path):
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise SourceUnreadable(path, e.strerror or e) from e


def decode(data, source):
    try:
        img = Image.open(io.BytesIO(data))
        img.load()
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        raise DecodeFailed(source, e) from e
    return img.convert("RGB")


def load_image(source, client=None):
    if is_url(source):
        data = fetch(source, client)
    else:
        data = read_file(source)
    return decode(data, source)

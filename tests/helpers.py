import io
import zlib

from PIL import Image

from pixelpng.png import read_chunks


def inflate_idat(data: bytes) -> bytes:
    return zlib.decompress(b"".join(c.payload for c in read_chunks(data) if c.tag == b"IDAT"))


def decode_rgba(data: bytes):
    with Image.open(io.BytesIO(data)) as img:
        img.load()
        width, height = img.size
        pixels = [img.getpixel((x, y)) for y in range(height) for x in range(width)]
        return img.size, img.mode, pixels

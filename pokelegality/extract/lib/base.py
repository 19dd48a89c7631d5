"""Base or helper classes for slicing up packed game-data blobs.
"""
import io
import struct

from pokelegality.errors import DecodeError


class Substream:
    """Wraps a stream and pretends it starts at an offset other than 0.

    Only reads; the packed tables we care about are never written back.
    Every read seeks first, so several substreams can share one underlying
    stream as long as nobody reads from two of them at once.
    """
    def __init__(self, stream, offset=0, length=-1):
        if isinstance(stream, Substream):
            self.stream = stream.stream
            self.offset = offset + stream.offset
        else:
            self.stream = stream
            self.offset = offset

        self.length = length
        self.pos = 0

    @classmethod
    def from_bytes(cls, data):
        return cls(io.BytesIO(data), 0, len(data))

    def __repr__(self):
        return "<{} of {} at {}>".format(
            type(self).__name__, self.stream, self.offset)

    def read(self, n=-1):
        self.stream.seek(self.offset + self.pos)
        maxread = self.length - self.pos
        if n < 0 or 0 <= maxread < n:
            n = maxread
        data = self.stream.read(n)
        self.pos += len(data)
        return data

    def read_exact(self, n, table=None):
        """Like `read`, but running out of data is a `DecodeError`."""
        start = self.pos
        data = self.read(n)
        if len(data) != n:
            raise DecodeError(
                "wanted {} bytes at offset {}, only {} left".format(
                    n, start, len(data)),
                table=table)
        return data

    def __len__(self):
        if self.length < 0:
            pos = self.stream.tell()
            self.stream.seek(0, io.SEEK_END)
            parent_length = self.stream.tell()
            self.stream.seek(pos)
            return parent_length - self.offset
        else:
            return self.length

    def unpack(self, fmt, table=None):
        """Unpacks a struct format from the current position in the stream."""
        data = self.read_exact(struct.calcsize(fmt), table=table)
        return struct.unpack(fmt, data)

    def slice(self, offset, length=-1):
        if offset < 0 or (length >= 0 and offset + length > len(self)):
            raise DecodeError(
                "slice {}+{} runs past the end of a {}-byte stream".format(
                    offset, length, len(self)))
        return Substream(self, offset, length)


class _ContainerFile:
    slices = ()

    def __len__(self):
        return len(self.slices)

    def __iter__(self):
        return iter(self.slices)

    def __getitem__(self, key):
        return self.slices[key]

"""Fixtures that build small tagged audio files at test time.

Each factory writes a real container with mutagen so the readers run
against genuine on-disk structures without shipping binary fixtures.
"""

from __future__ import annotations

import struct
import wave
from collections.abc import Callable, Iterable
from pathlib import Path

import pytest
from mutagen.apev2 import APEv2
from mutagen.aiff import AIFF
from mutagen.flac import FLAC, Picture
from mutagen.id3 import ID3, Frame
from mutagen.wave import WAVE

# 44100 Hz as an 80-bit IEEE extended float
_AIFF_RATE_44100: bytes = bytes.fromhex("400EAC44000000000000")

ID3FileFactory = Callable[..., Path]


def _aiff_bytes() -> bytes:
    comm = struct.pack(">hLh", 1, 0, 16) + _AIFF_RATE_44100
    ssnd = struct.pack(">LL", 0, 0)
    body = b"AIFF"
    body += b"COMM" + struct.pack(">L", len(comm)) + comm
    body += b"SSND" + struct.pack(">L", len(ssnd)) + ssnd
    return b"FORM" + struct.pack(">L", len(body)) + body


def _mpeg_frames(count: int) -> bytes:
    """Silent MPEG-1 Layer III frames: 128 kbit/s, 44.1 kHz, 417 bytes each."""
    header = bytes.fromhex("FFFB9064")
    return (header + bytes(417 - len(header))) * count


def _ape_tag_bytes(items: Iterable[tuple[str, str]]) -> bytes:
    """Encode text items, in order, followed by a footer-only APEv2 tag."""
    body = b""
    count = 0
    for key, value in items:
        encoded = value.encode("utf-8")
        body += struct.pack("<II", len(encoded), 0) + key.encode("ascii") + b"\x00" + encoded
        count += 1
    footer = b"APETAGEX" + struct.pack("<IIII", 2000, len(body) + 32, count, 0) + bytes(8)
    return body + footer


def _flac_bytes(sample_rate: int, total_samples: int) -> bytes:
    packed = (sample_rate << 44) | (1 << 41) | (15 << 36) | total_samples
    streaminfo = struct.pack(">HH", 4096, 4096) + bytes(6) + packed.to_bytes(8, "big") + bytes(16)
    header = bytes([0x80]) + len(streaminfo).to_bytes(3, "big")
    return b"fLaC" + header + streaminfo


@pytest.fixture
def mp3_file(tmp_path: Path) -> ID3FileFactory:
    """Write an ID3v2 tag, optionally followed by silent MPEG frames."""

    def _build(
        frames: Iterable[Frame],
        name: str = "track.mp3",
        v2_version: int = 4,
        audio_frames: int = 0,
    ) -> Path:
        path = tmp_path / name
        _ = path.write_bytes(_mpeg_frames(audio_frames))
        tags = ID3()
        for frame in frames:
            tags.add(frame)
        tags.save(path, v2_version=v2_version)
        return path

    return _build


@pytest.fixture
def wave_file(tmp_path: Path) -> ID3FileFactory:
    """Write a one-tenth-second silent WAVE file carrying an ``id3`` chunk."""

    def _build(frames: Iterable[Frame], name: str = "track.wav") -> Path:
        path = tmp_path / name
        with wave.open(str(path), "wb") as writer:
            writer.setnchannels(1)
            writer.setsampwidth(2)
            writer.setframerate(8000)
            writer.writeframes(b"\x00\x00" * 800)

        audio = WAVE(path)
        audio.add_tags()
        for frame in frames:
            audio.tags.add(frame)
        audio.save()
        return path

    return _build


@pytest.fixture
def aiff_file(tmp_path: Path) -> ID3FileFactory:
    """Write an empty AIFF stream carrying an ``ID3`` chunk."""

    def _build(frames: Iterable[Frame] | None, name: str = "track.aiff") -> Path:
        path = tmp_path / name
        _ = path.write_bytes(_aiff_bytes())
        if frames is None:
            return path

        audio = AIFF(path)
        audio.add_tags()
        for frame in frames:
            audio.tags.add(frame)
        audio.save()
        return path

    return _build


@pytest.fixture
def ape_file(tmp_path: Path) -> Callable[..., Path]:
    """Append an APEv2 tag built from ``items`` to a small payload."""

    def _build(items: dict[str, str | list[str]] | None, name: str = "track.ape") -> Path:
        path = tmp_path / name
        _ = path.write_bytes(b"MAC \x00" * 16)
        if items is None:
            return path

        tag = APEv2()
        for key, value in items.items():
            tag[key] = value
        tag.save(path)
        return path

    return _build


@pytest.fixture
def raw_ape_file(tmp_path: Path) -> Callable[..., Path]:
    """Write an APEv2 tag byte for byte, keeping repeated and cased keys."""

    def _build(items: Iterable[tuple[str, str]], name: str = "track.ape") -> Path:
        path = tmp_path / name
        _ = path.write_bytes(b"MAC \x00" * 16 + _ape_tag_bytes(items))
        return path

    return _build


@pytest.fixture
def flac_file(tmp_path: Path) -> Callable[..., Path]:
    """Write a FLAC header with STREAMINFO and optional Vorbis comments."""

    def _build(
        comments: dict[str, list[str]] | None,
        name: str = "track.flac",
        sample_rate: int = 44100,
        total_samples: int = 44100 * 3,
        picture: bool = False,
    ) -> Path:
        path = tmp_path / name
        _ = path.write_bytes(_flac_bytes(sample_rate, total_samples))
        if comments is None:
            return path

        audio = FLAC(path)
        audio.add_tags()
        for key, values in comments.items():
            audio.tags[key] = values
        if picture:
            cover = Picture()
            cover.type = 3
            cover.mime = "image/png"
            cover.data = b"\x89PNG\r\n"
            audio.add_picture(cover)
        audio.save()
        return path

    return _build

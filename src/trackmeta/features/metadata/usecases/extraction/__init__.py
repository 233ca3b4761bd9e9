"""
Summary: Public surface for metadata reading modules.
Why: Provide a stable import path for the dispatcher, the CLI and tests.
"""

from ._base_readers import AudioFormatReader, BaseMutagenReader
from .atom_tag_readers import Mp4Reader
from .block_container_readers import FlacReader
from .comment_list_readers import CommentListReader, OpusReader, VorbisReader, collect_comment_metadata
from .frame_tag_readers import AiffReader, FrameTagReader, Mp3Reader, WaveReader
from .item_tag_readers import ApeReader
from .track_metadata_reader import MetadataReader, read

__all__ = [
    "MetadataReader",
    "read",
    "AudioFormatReader",
    "BaseMutagenReader",
    "FrameTagReader",
    "Mp3Reader",
    "AiffReader",
    "WaveReader",
    "ApeReader",
    "CommentListReader",
    "VorbisReader",
    "OpusReader",
    "collect_comment_metadata",
    "FlacReader",
    "Mp4Reader",
]

"""Uploaded files: size, MIME type, extension and file name policies.

Any object exposing ``name``/``filename``, ``size`` and ``type``/``content_type``
is accepted (``FileInfo``, framework upload objects, plain dicts).
"""

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import field_validator

from validkit.domain.validators.base import Rule, Validator
from validkit.domain.validators.common.text import as_tuple
from validkit.domain.validators.options import ValidatorOptions, resolve_options

IMAGE_TYPES = frozenset({
    "image/jpeg", "image/jpg", "image/png", "image/gif",
    "image/webp", "image/svg+xml", "image/bmp", "image/tiff",
})
DOCUMENT_TYPES = frozenset({
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "application/vnd.ms-excel",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "application/vnd.ms-powerpoint",
    "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    "text/plain",
    "text/csv",
})
VIDEO_TYPES = frozenset({
    "video/mp4", "video/mpeg", "video/quicktime", "video/x-msvideo",
    "video/x-ms-wmv", "video/webm", "video/ogg",
})
AUDIO_TYPES = frozenset({
    "audio/mpeg", "audio/wav", "audio/ogg", "audio/aac",
    "audio/webm", "audio/mp3", "audio/x-wav",
})
ARCHIVE_TYPES = frozenset({
    "application/zip", "application/x-rar-compressed", "application/x-7z-compressed",
    "application/x-tar", "application/gzip",
})


@dataclass(frozen=True, slots=True, kw_only=True)
class FileInfo:
    """File metadata as seen by the ``file`` validator.

    Attributes:
        name: File name including extension.
        size: Size in bytes.
        type: MIME type (``""`` when unknown).
    """

    name: str
    size: int
    type: str = ""


def _field(value: Any, *names: str) -> Any:
    for name in names:
        if isinstance(value, Mapping):
            if name in value:
                return value[name]
        elif hasattr(value, name):
            return getattr(value, name)
    return None


def as_file_info(value: Any) -> FileInfo | None:
    """Read file metadata from a duck-typed object, or None if it is not file-like."""
    if isinstance(value, FileInfo):
        return value
    name = _field(value, "name", "filename")
    size = _field(value, "size")
    if not isinstance(name, str) or isinstance(size, bool) or not isinstance(size, int):
        return None
    content_type = _field(value, "type", "content_type")
    return FileInfo(name=name, size=size, type=content_type if isinstance(content_type, str) else "")


def format_file_size(size: int | float) -> str:
    """Human readable size with up to two decimals.

    >>> format_file_size(1536)
    '1.5 KB'
    >>> format_file_size(5 * 1024 * 1024)
    '5 MB'
    """
    units = ("B", "KB", "MB", "GB", "TB")
    index = 0
    while size >= 1024 and index < len(units) - 1:
        size /= 1024
        index += 1
    number = f"{round(size, 2):.2f}".rstrip("0").rstrip(".")
    return f"{number} {units[index]}"


def file_extension(name: str, case_sensitive: bool = False) -> str:
    """Extension with its leading dot, or ``""``."""
    dot = name.rfind(".")
    if dot == -1:
        return ""
    extension = name[dot:]
    return extension if case_sensitive else extension.lower()


def normalize_extension(extension: str, case_sensitive: bool = False) -> str:
    normalized = extension if extension.startswith(".") else f".{extension}"
    return normalized if case_sensitive else normalized.lower()


def prepare_file(
    value: Any,
    *,
    default: FileInfo | None,
    transform: Callable[[FileInfo], FileInfo] | None,
) -> Any:
    if value is None or value == "":
        return default
    info = as_file_info(value)
    if info is None:
        return value
    return transform(info) if transform is not None else info


class FileOptions(ValidatorOptions):
    """Options for ``file``.

    Attributes:
        min_size / max_size: Size bounds in bytes.
        type: Allowed MIME type(s).
        type_blacklist: Rejected MIME types.
        extension: Allowed extension(s), with or without the dot.
        extension_blacklist: Rejected extensions.
        name_pattern: Regex the file name must match.
        name_blacklist: Regex(es) the file name must not match.
        image_only / document_only / video_only / audio_only / archive_only:
            Restrict to a MIME type family.
        case_sensitive: Compare extensions case-sensitively.
    """

    max_size: int | None = None
    min_size: int | None = None
    type: tuple[str, ...] | None = None
    type_blacklist: tuple[str, ...] = ()
    extension: tuple[str, ...] | None = None
    extension_blacklist: tuple[str, ...] = ()
    name_pattern: re.Pattern[str] | None = None
    name_blacklist: tuple[re.Pattern[str], ...] = ()
    image_only: bool = False
    document_only: bool = False
    video_only: bool = False
    audio_only: bool = False
    archive_only: bool = False
    case_sensitive: bool = False
    default_value: FileInfo | None = None

    @field_validator("type", "extension", mode="before")
    @classmethod
    def accept_single_value(cls, v: Any) -> Any:
        return as_tuple(v)

    @field_validator("name_pattern", mode="before")
    @classmethod
    def compile_name_pattern(cls, v: Any) -> Any:
        return re.compile(v) if isinstance(v, str) else v

    @field_validator("name_blacklist", mode="before")
    @classmethod
    def compile_name_blacklist(cls, v: Any) -> Any:
        if isinstance(v, str | re.Pattern):
            v = (v,)
        return tuple(re.compile(p) if isinstance(p, str) else p for p in v)


def file(options: FileOptions | None = None, **kwargs: Any) -> Validator[FileInfo]:
    """Build a file validator.

    Keys, in evaluation order: ``required``, ``invalid`` (not file-like),
    ``minSize``, ``maxSize``, ``imageOnly``, ``documentOnly``, ``videoOnly``,
    ``audioOnly``, ``archiveOnly``, ``type`` (blacklist, then allowlist),
    ``extensionBlacklist``, ``extension``, ``name``, ``nameBlacklist``.

    Example:
        >>> v = file(max_size=1024)
        >>> v.safe_parse(FileInfo(name="a.png", size=2048, type="image/png")).error.params
        {'maxSize': '1 KB'}
    """
    opts = resolve_options(FileOptions, options, kwargs)
    sensitive = opts.case_sensitive

    def ext(value: FileInfo) -> str:
        return file_extension(value.name, sensitive)

    rules: list[Rule] = [Rule("invalid", lambda v: isinstance(v, FileInfo))]
    if opts.min_size is not None:
        rules.append(
            Rule("minSize", lambda v: v.size >= opts.min_size, {"minSize": format_file_size(opts.min_size)})
        )
    if opts.max_size is not None:
        rules.append(
            Rule("maxSize", lambda v: v.size <= opts.max_size, {"maxSize": format_file_size(opts.max_size)})
        )
    for enabled, key, family in (
        (opts.image_only, "imageOnly", IMAGE_TYPES),
        (opts.document_only, "documentOnly", DOCUMENT_TYPES),
        (opts.video_only, "videoOnly", VIDEO_TYPES),
        (opts.audio_only, "audioOnly", AUDIO_TYPES),
        (opts.archive_only, "archiveOnly", ARCHIVE_TYPES),
    ):
        if enabled:
            rules.append(Rule(key, lambda v, f=family: v.type in f))
    if opts.type_blacklist:
        rules.append(
            Rule("type", lambda v: v.type not in opts.type_blacklist, {"type": opts.type_blacklist})
        )
    if opts.type is not None:
        rules.append(Rule("type", lambda v: v.type in opts.type, {"type": opts.type}))
    if opts.extension_blacklist:
        blocked = frozenset(normalize_extension(e, sensitive) for e in opts.extension_blacklist)
        rules.append(
            Rule(
                "extensionBlacklist",
                lambda v: ext(v) not in blocked,
                {"extension": opts.extension_blacklist},
            )
        )
    if opts.extension is not None:
        allowed = frozenset(normalize_extension(e, sensitive) for e in opts.extension)
        rules.append(Rule("extension", lambda v: ext(v) in allowed, {"extension": opts.extension}))
    if opts.name_pattern is not None:
        rules.append(
            Rule(
                "name",
                lambda v: opts.name_pattern.search(v.name) is not None,
                {"pattern": opts.name_pattern.pattern},
            )
        )
    if opts.name_blacklist:

        def blocked_pattern(value: FileInfo) -> str | None:
            return next((p.pattern for p in opts.name_blacklist if p.search(value.name)), None)

        rules.append(
            Rule(
                "nameBlacklist",
                lambda v: blocked_pattern(v) is None,
                lambda v: {"pattern": blocked_pattern(v)},
            )
        )

    def prepare(value: Any) -> Any:
        return prepare_file(value, default=opts.default_value, transform=opts.transform)

    return Validator(
        "file",
        namespace="common.file",
        required=opts.required,
        preprocess=prepare,
        rules=rules,
        messages=opts.messages,
    )

"""General-purpose validators."""

from validkit.domain.validators.common.boolean import BooleanOptions, boolean
from validkit.domain.validators.common.color import (
    ColorFormat,
    ColorOptions,
    color,
    is_hex_color,
    is_hsl_color,
    is_rgb_color,
    validate_color,
)
from validkit.domain.validators.common.coordinate import (
    CoordinateOptions,
    CoordinateType,
    coordinate,
    validate_latitude,
    validate_longitude,
)
from validkit.domain.validators.common.credit_card import (
    CardType,
    CreditCardOptions,
    credit_card,
    detect_card_type,
    luhn_checksum_ok,
    validate_credit_card,
)
from validkit.domain.validators.common.date import DateOptions, date
from validkit.domain.validators.common.datetime import (
    DateTimeFormat,
    DateTimeOptions,
    datetime,
    format_datetime_value,
    normalize_datetime_value,
    parse_datetime_value,
    validate_datetime_format,
)
from validkit.domain.validators.common.email import EmailOptions, email
from validkit.domain.validators.common.file import (
    FileInfo,
    FileOptions,
    file,
    format_file_size,
)
from validkit.domain.validators.common.id import (
    IdOptions,
    IdType,
    detect_id_type,
    id,
    validate_id_type,
)
from validkit.domain.validators.common.integer import IntegerOptions, integer
from validkit.domain.validators.common.ip import (
    IpOptions,
    IpVersion,
    ip,
    validate_ipv4,
    validate_ipv6,
)
from validkit.domain.validators.common.number import NumberOptions, NumberType, number
from validkit.domain.validators.common.password import (
    PasswordOptions,
    PasswordStrength,
    calculate_password_strength,
    password,
)
from validkit.domain.validators.common.text import TextOptions, text
from validkit.domain.validators.common.time import (
    TimeFormat,
    TimeOptions,
    normalize_time,
    parse_time,
    time,
    validate_time_format,
)
from validkit.domain.validators.common.url import UrlOptions, url

__all__ = [
    "BooleanOptions",
    "CardType",
    "ColorFormat",
    "ColorOptions",
    "CoordinateOptions",
    "CoordinateType",
    "CreditCardOptions",
    "DateOptions",
    "DateTimeFormat",
    "DateTimeOptions",
    "EmailOptions",
    "FileInfo",
    "FileOptions",
    "IdOptions",
    "IdType",
    "IntegerOptions",
    "IpOptions",
    "IpVersion",
    "NumberOptions",
    "NumberType",
    "PasswordOptions",
    "PasswordStrength",
    "TextOptions",
    "TimeFormat",
    "TimeOptions",
    "UrlOptions",
    "boolean",
    "calculate_password_strength",
    "color",
    "coordinate",
    "credit_card",
    "date",
    "datetime",
    "detect_card_type",
    "detect_id_type",
    "email",
    "file",
    "format_datetime_value",
    "format_file_size",
    "id",
    "integer",
    "ip",
    "is_hex_color",
    "is_hsl_color",
    "is_rgb_color",
    "luhn_checksum_ok",
    "normalize_datetime_value",
    "normalize_time",
    "number",
    "parse_datetime_value",
    "parse_time",
    "password",
    "text",
    "time",
    "url",
    "validate_color",
    "validate_credit_card",
    "validate_datetime_format",
    "validate_id_type",
    "validate_ipv4",
    "validate_ipv6",
    "validate_latitude",
    "validate_longitude",
    "validate_time_format",
]

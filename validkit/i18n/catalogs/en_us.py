"""English (United States) messages."""

EN_US: dict[str, dict] = {
    "common": {
        "required": "Required",
        "text": {
            "notEmpty": "Must not be blank",
            "minLength": "Must be at least ${minLength} characters",
            "maxLength": "Must be at most ${maxLength} characters",
            "startsWith": "Must start with ${startsWith}",
            "endsWith": "Must end with ${endsWith}",
            "includes": "Must include ${includes}",
            "excludes": "Must not contain ${excludes}",
            "invalid": "Invalid format",
        },
        "email": {
            "invalid": "Invalid email format",
            "minLength": "Must be at least ${minLength} characters",
            "maxLength": "Must be at most ${maxLength} characters",
            "includes": "Must include ${includes}",
            "excludes": "Must not contain ${excludes}",
            "businessOnly": "Must be a business email address",
            "domainBlacklist": "Email domain ${domain} is not allowed",
            "domain": "Must be under the domain @${domain}",
            "noDisposable": "Disposable email addresses are not allowed",
        },
        "password": {
            "min": "Must be at least ${min} characters",
            "max": "Must be at most ${max} characters",
            "uppercase": "Must include at least one uppercase letter",
            "lowercase": "Must include at least one lowercase letter",
            "digits": "Must include at least one digit",
            "special": "Must include at least one special character",
            "noRepeating": "Must not contain repeating characters",
            "noSequential": "Must not contain sequential characters",
            "noCommonWords": "Must not contain common words or patterns",
            "minStrength": "Password strength must be at least ${minStrength}",
            "includes": "Must include ${includes}",
            "excludes": "Must not contain ${excludes}",
            "invalid": "Invalid password format",
        },
        "number": {
            "invalid": "Must be a valid number",
            "integer": "Must be an integer",
            "float": "Must be a decimal number",
            "finite": "Must be a finite number",
            "positive": "Must be positive",
            "negative": "Must be negative",
            "nonNegative": "Must be non-negative",
            "nonPositive": "Must be non-positive",
            "min": "Must be at least ${min}",
            "max": "Must be at most ${max}",
            "multipleOf": "Must be a multiple of ${multipleOf}",
            "precision": "Must have at most ${precision} decimal places",
        },
        "integer": {
            "integer": "Must be an integer",
            "min": "Must be at least ${min}",
            "max": "Must be at most ${max}",
        },
        "boolean": {
            "invalid": "Must be a boolean value",
            "shouldBeTrue": "Must be True",
            "shouldBeFalse": "Must be False",
        },
        "url": {
            "invalid": "Invalid URL format",
            "min": "Must be at least ${min} characters",
            "max": "Must be at most ${max} characters",
            "includes": "Must include ${includes}",
            "excludes": "Must not contain ${excludes}",
            "protocol": "Protocol must be one of: ${protocols}",
            "domain": "Domain must be one of: ${domains}",
            "domainBlacklist": "Domain ${domain} is not allowed",
            "port": "Port ${port} is not allowed",
            "pathStartsWith": "Path must start with ${path}",
            "pathEndsWith": "Path must end with ${path}",
            "hasQuery": "Must contain query parameters",
            "noQuery": "Must not contain query parameters",
            "hasFragment": "Must contain a fragment",
            "noFragment": "Must not contain a fragment",
            "noLocalhost": "Localhost URLs are not allowed",
            "localhost": "Localhost URLs are not allowed",
        },
        "date": {
            "format": "Must be in ${format} format",
            "min": "Date must be on or after ${min}",
            "max": "Date must be on or before ${max}",
            "includes": "Must include ${includes}",
            "excludes": "Must not contain ${excludes}",
            "past": "Date must be in the past",
            "future": "Date must be in the future",
            "today": "Date must be today",
            "notToday": "Date must not be today",
            "weekday": "Date must be a weekday",
            "weekend": "Date must be a weekend",
        },
        "time": {
            "format": "Must be in ${format} format",
            "invalid": "Invalid time",
            "customRegex": "Invalid time format",
            "min": "Time must be after ${min}",
            "max": "Time must be before ${max}",
            "hour": "Hour must be between ${minHour} and ${maxHour}",
            "minute": "Minutes must be in ${minuteStep}-minute intervals",
            "second": "Seconds must be in ${secondStep}-second intervals",
            "includes": "Must include ${includes}",
            "excludes": "Must not contain ${excludes}",
            "notInWhitelist": "Time is not in the allowed list",
        },
        "datetime": {
            "format": "Must be in ${format} format",
            "invalid": "Invalid datetime",
            "customRegex": "Invalid datetime format",
            "min": "DateTime must be after ${min}",
            "max": "DateTime must be before ${max}",
            "hour": "Hour must be between ${minHour} and ${maxHour}",
            "minute": "Minutes must be in ${minuteStep}-minute intervals",
            "includes": "Must include ${includes}",
            "excludes": "Must not contain ${excludes}",
            "past": "DateTime must be in the past",
            "future": "DateTime must be in the future",
            "today": "DateTime must be today",
            "notToday": "DateTime must not be today",
            "weekday": "DateTime must be a weekday",
            "weekend": "DateTime must be a weekend",
            "notInWhitelist": "DateTime is not in the allowed list",
        },
        "color": {
            "invalid": "Invalid color format",
            "notHex": "Must be a valid hex color",
            "notRgb": "Must be a valid RGB color",
            "notHsl": "Must be a valid HSL color",
        },
        "coordinate": {
            "invalid": "Invalid coordinate",
            "invalidLatitude": "Latitude must be between -90 and 90",
            "invalidLongitude": "Longitude must be between -180 and 180",
        },
        "creditCard": {
            "invalid": "Invalid credit card number",
            "notInWhitelist": "Credit card number is not in the allowed list",
        },
        "ip": {
            "invalid": "Invalid IP address",
            "notIPv4": "Must be a valid IPv4 address",
            "notIPv6": "Must be a valid IPv6 address",
            "notInWhitelist": "IP address is not in the allowed list",
        },
        "id": {
            "invalid": "Invalid ID format",
            "minLength": "Must be at least ${minLength} characters",
            "maxLength": "Must be at most ${maxLength} characters",
            "customFormat": "Invalid ID format",
            "numeric": "Must be a numeric ID",
            "uuid": "Must be a valid UUID",
            "objectId": "Must be a valid MongoDB ObjectId",
            "nanoid": "Must be a valid Nano ID",
            "snowflake": "Must be a valid Snowflake ID",
            "cuid": "Must be a valid CUID",
            "ulid": "Must be a valid ULID",
            "shortid": "Must be a valid Short ID",
            "startsWith": "Must start with ${startsWith}",
            "endsWith": "Must end with ${endsWith}",
            "includes": "Must include ${includes}",
            "excludes": "Must not contain ${excludes}",
        },
        "file": {
            "invalid": "Invalid file",
            "minSize": "File size must be at least ${minSize}",
            "maxSize": "File size must not exceed ${maxSize}",
            "imageOnly": "Only image files are allowed",
            "documentOnly": "Only document files are allowed",
            "videoOnly": "Only video files are allowed",
            "audioOnly": "Only audio files are allowed",
            "archiveOnly": "Only archive files are allowed",
            "type": "File type must be one of: ${type}",
            "extension": "File extension must be one of: ${extension}",
            "extensionBlacklist": "File extension ${extension} is not allowed",
            "name": "File name must match pattern ${pattern}",
            "nameBlacklist": "File name must not match pattern ${pattern}",
        },
    },
    "taiwan": {
        "national_id": {
            "invalid": "Invalid Taiwan National ID",
        },
        "business_id": {
            "numbersOnly": "Must contain only numbers",
            "length": "Must be exactly ${length} digits",
            "invalid": "Invalid Taiwan Business ID checksum",
        },
        "tel": {
            "invalid": "Invalid Taiwan telephone format",
        },
        "fax": {
            "invalid": "Invalid Taiwan fax format",
            "notInWhitelist": "Not in allowed fax list",
        },
        "mobile": {
            "invalid": "Invalid Taiwan mobile phone format",
        },
        "postal_code": {
            "invalid": "Invalid Taiwan postal code",
            "invalidSuffix": "Invalid postal code suffix",
            "format3Only": "Only 3-digit postal codes are allowed",
            "format5Only": "Only 5-digit postal codes are allowed",
            "format6Only": "Only 6-digit postal codes are allowed",
            "deprecated5Digit": "5-digit postal codes are deprecated",
            "legacy5DigitWarning": "5-digit postal codes are a legacy format; use the 6-digit format",
        },
        "bank_account": {
            "invalid": "Invalid bank account format",
            "invalidBankCode": "Invalid bank code",
            "invalidAccountNumber": "Invalid account number",
        },
        "invoice": {
            "invalid": "Invalid Taiwan uniform invoice number",
        },
        "license_plate": {
            "invalid": "Invalid Taiwan license plate number",
        },
        "passport": {
            "invalid": "Invalid Taiwan passport number",
        },
    },
}

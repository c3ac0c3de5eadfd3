"""Traditional Chinese (Taiwan) messages."""

ZH_TW: dict[str, dict] = {
    "common": {
        "required": "必填",
        "text": {
            "notEmpty": "不可為空白",
            "minLength": "長度至少 ${minLength} 個字元",
            "maxLength": "長度最多 ${maxLength} 個字元",
            "startsWith": "必須以 ${startsWith} 開頭",
            "endsWith": "必須以 ${endsWith} 結尾",
            "includes": "必須包含 ${includes}",
            "excludes": "不得包含 ${excludes}",
            "invalid": "格式錯誤",
        },
        "email": {
            "invalid": "無效的電子郵件格式",
            "minLength": "長度至少 ${minLength} 個字元",
            "maxLength": "長度最多 ${maxLength} 個字元",
            "includes": "必須包含 ${includes}",
            "excludes": "不得包含 ${excludes}",
            "businessOnly": "必須為企業電子郵件",
            "domainBlacklist": "不允許使用 ${domain} 網域",
            "domain": "必須為 @${domain} 網域",
            "noDisposable": "不允許使用拋棄式電子郵件",
        },
        "password": {
            "min": "長度至少 ${min} 個字元",
            "max": "長度最多 ${max} 個字元",
            "uppercase": "必須包含至少一個大寫字母",
            "lowercase": "必須包含至少一個小寫字母",
            "digits": "必須包含至少一個數字",
            "special": "必須包含至少一個特殊字元",
            "noRepeating": "不得包含重複字元",
            "noSequential": "不得包含連續字元",
            "noCommonWords": "不得包含常見的字詞或模式",
            "minStrength": "密碼強度至少需為 ${minStrength}",
            "includes": "必須包含 ${includes}",
            "excludes": "不得包含 ${excludes}",
            "invalid": "密碼格式錯誤",
        },
        "number": {
            "invalid": "必須為有效的數字",
            "integer": "必須為整數",
            "float": "必須為小數",
            "finite": "必須為有限數值",
            "positive": "必須為正數",
            "negative": "必須為負數",
            "nonNegative": "不可為負數",
            "nonPositive": "不可為正數",
            "min": "不可小於 ${min}",
            "max": "不可大於 ${max}",
            "multipleOf": "必須為 ${multipleOf} 的倍數",
            "precision": "最多 ${precision} 位小數",
        },
        "integer": {
            "integer": "必須為整數",
            "min": "不可小於 ${min}",
            "max": "不可大於 ${max}",
        },
        "boolean": {
            "invalid": "必須為布林值",
            "shouldBeTrue": "必須為是",
            "shouldBeFalse": "必須為否",
        },
        "url": {
            "invalid": "無效的 URL 格式",
            "min": "長度至少 ${min} 個字元",
            "max": "長度最多 ${max} 個字元",
            "includes": "必須包含 ${includes}",
            "excludes": "不得包含 ${excludes}",
            "protocol": "協定必須為 ${protocols}",
            "domain": "網域必須為 ${domains}",
            "domainBlacklist": "不允許使用 ${domain} 網域",
            "port": "不允許使用連接埠 ${port}",
            "pathStartsWith": "路徑必須以 ${path} 開頭",
            "pathEndsWith": "路徑必須以 ${path} 結尾",
            "hasQuery": "必須包含查詢參數",
            "noQuery": "不得包含查詢參數",
            "hasFragment": "必須包含片段識別碼",
            "noFragment": "不得包含片段識別碼",
            "noLocalhost": "不允許使用本機網址",
            "localhost": "不允許使用本機網址",
        },
        "date": {
            "format": "必須為 ${format} 格式",
            "min": "日期不可早於 ${min}",
            "max": "日期不可晚於 ${max}",
            "includes": "必須包含 ${includes}",
            "excludes": "不得包含 ${excludes}",
            "past": "日期必須為過去",
            "future": "日期必須為未來",
            "today": "日期必須為今天",
            "notToday": "日期不可為今天",
            "weekday": "日期必須為平日",
            "weekend": "日期必須為週末",
        },
        "time": {
            "format": "必須為 ${format} 格式",
            "invalid": "無效的時間",
            "customRegex": "無效的時間格式",
            "min": "時間必須晚於 ${min}",
            "max": "時間必須早於 ${max}",
            "hour": "小時必須介於 ${minHour} 與 ${maxHour} 之間",
            "minute": "分鐘必須以 ${minuteStep} 分鐘為間隔",
            "second": "秒數必須以 ${secondStep} 秒為間隔",
            "includes": "必須包含 ${includes}",
            "excludes": "不得包含 ${excludes}",
            "notInWhitelist": "時間不在允許清單中",
        },
        "datetime": {
            "format": "必須為 ${format} 格式",
            "invalid": "無效的日期時間",
            "customRegex": "無效的日期時間格式",
            "min": "日期時間必須晚於 ${min}",
            "max": "日期時間必須早於 ${max}",
            "hour": "小時必須介於 ${minHour} 與 ${maxHour} 之間",
            "minute": "分鐘必須以 ${minuteStep} 分鐘為間隔",
            "includes": "必須包含 ${includes}",
            "excludes": "不得包含 ${excludes}",
            "past": "日期時間必須為過去",
            "future": "日期時間必須為未來",
            "today": "日期時間必須為今天",
            "notToday": "日期時間不可為今天",
            "weekday": "日期時間必須為平日",
            "weekend": "日期時間必須為週末",
            "notInWhitelist": "日期時間不在允許清單中",
        },
        "color": {
            "invalid": "無效的顏色格式",
            "notHex": "必須為有效的十六進位顏色",
            "notRgb": "必須為有效的 RGB 顏色",
            "notHsl": "必須為有效的 HSL 顏色",
        },
        "coordinate": {
            "invalid": "無效的座標",
            "invalidLatitude": "緯度必須介於 -90 與 90 之間",
            "invalidLongitude": "經度必須介於 -180 與 180 之間",
        },
        "creditCard": {
            "invalid": "無效的信用卡號碼",
            "notInWhitelist": "信用卡號碼不在允許清單中",
        },
        "ip": {
            "invalid": "無效的 IP 位址",
            "notIPv4": "必須為有效的 IPv4 位址",
            "notIPv6": "必須為有效的 IPv6 位址",
            "notInWhitelist": "IP 位址不在允許清單中",
        },
        "id": {
            "invalid": "無效的 ID 格式",
            "minLength": "長度至少 ${minLength} 個字元",
            "maxLength": "長度最多 ${maxLength} 個字元",
            "customFormat": "無效的 ID 格式",
            "numeric": "必須為數字 ID",
            "uuid": "必須為有效的 UUID",
            "objectId": "必須為有效的 MongoDB ObjectId",
            "nanoid": "必須為有效的 Nano ID",
            "snowflake": "必須為有效的 Snowflake ID",
            "cuid": "必須為有效的 CUID",
            "ulid": "必須為有效的 ULID",
            "shortid": "必須為有效的 Short ID",
            "startsWith": "必須以 ${startsWith} 開頭",
            "endsWith": "必須以 ${endsWith} 結尾",
            "includes": "必須包含 ${includes}",
            "excludes": "不得包含 ${excludes}",
        },
        "file": {
            "invalid": "無效的檔案",
            "minSize": "檔案大小至少 ${minSize}",
            "maxSize": "檔案大小不可超過 ${maxSize}",
            "imageOnly": "僅允許圖片檔案",
            "documentOnly": "僅允許文件檔案",
            "videoOnly": "僅允許影片檔案",
            "audioOnly": "僅允許音訊檔案",
            "archiveOnly": "僅允許壓縮檔案",
            "type": "檔案類型必須為: ${type}",
            "extension": "副檔名必須為: ${extension}",
            "extensionBlacklist": "不允許的副檔名 ${extension}",
            "name": "檔案名稱必須符合 ${pattern}",
            "nameBlacklist": "檔案名稱不可符合 ${pattern}",
        },
    },
    "taiwan": {
        "national_id": {
            "invalid": "無效的身分證字號",
        },
        "business_id": {
            "numbersOnly": "只能包含數字",
            "length": "必須為${length}位數字",
            "invalid": "統一編號檢查碼錯誤",
        },
        "tel": {
            "invalid": "無效的市話號碼格式",
        },
        "fax": {
            "invalid": "無效的傳真號碼格式",
            "notInWhitelist": "不在允許的傳真號碼清單中",
        },
        "mobile": {
            "invalid": "無效的手機號碼格式",
        },
        "postal_code": {
            "invalid": "無效的郵遞區號",
            "invalidSuffix": "無效的郵遞區號後綴",
            "format3Only": "僅允許 3 碼郵遞區號",
            "format5Only": "僅允許 5 碼郵遞區號",
            "format6Only": "僅允許 6 碼郵遞區號",
            "deprecated5Digit": "5 碼郵遞區號已停用",
            "legacy5DigitWarning": "5 碼郵遞區號為舊格式，請改用 6 碼格式",
        },
        "bank_account": {
            "invalid": "無效的銀行帳號格式",
            "invalidBankCode": "無效的銀行代碼",
            "invalidAccountNumber": "無效的帳號號碼",
        },
        "invoice": {
            "invalid": "無效的統一發票號碼",
        },
        "license_plate": {
            "invalid": "無效的車牌號碼",
        },
        "passport": {
            "invalid": "無效的護照號碼",
        },
    },
}

from types import MappingProxyType

FALLBACK_LOCALE = "en"

# host locale code -> asset directory holding that locale's blank templates
LOCALE_PATHS = MappingProxyType({
    "az": "az-Latn-AZ",
    "bg": "bg-BG",
    "cs": "cs-CZ",
    "de": "de-DE",
    "de_DE": "de-DE",
    "el": "el-GR",
    "en": "en-US",
    "en_GB": "en-GB",
    "es": "es-ES",
    "fr": "fr-FR",
    "it": "it-IT",
    "ja": "ja-JP",
    "ko": "ko-KR",
    "lv": "lv-LV",
    "nl": "nl-NL",
    "pl": "pl-PL",
    "pt_BR": "pt-BR",
    "pt_PT": "pt-PT",
    "ru": "ru-RU",
    "sk": "sk-SK",
    "sv": "sv-SE",
    "uk": "uk-UA",
    "vi": "vi-VN",
    "zh_CN": "zh-CN",
})


def resolve_locale_dir(locale: str | None) -> str:
    """
    Map a locale code to its asset directory.
    Codes missing from the table (including unlisted region variants such as
    "de_AT") use the "en" directory; no prefix matching is attempted.
    """
    if locale not in LOCALE_PATHS:
        locale = FALLBACK_LOCALE
    return LOCALE_PATHS[locale]

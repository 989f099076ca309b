"""
Report Rules for InspectWP Report Exporter
Fixed section list and the bilingual Name Mapping Table.

Each mapped field is written as "<Polish> <= <English>" (or just one name when
both languages use the same label). The order of the fields is the order of the
exported rows, independent of where the report renders them.
"""

from dataclasses import dataclass

# Normalized statuses (written verbatim into the exported sheet)
STATUS_OK = "wszystko ok"
STATUS_NEEDS_ATTENTION = "wymaga uwagi"
STATUS_NEEDS_FIX = "wymaga poprawy"

# Free-text outcome of the WordPress version check
NOTE_VERSION_HIDDEN = "wersja WP ukryta"

SEPARATOR = "--"
NAME_SEPARATOR = " <= "

# Extraction strategies
STRATEGY_GENERIC_TABLE = "generic-table"
STRATEGY_HTML_BADGES = "html-badges"
STRATEGY_CONTENT_HEADING = "content-heading"
STRATEGY_TOOLS_LISTING = "tools-listing"


@dataclass(frozen=True)
class Section:
    key: str
    selector: str
    strategy: str
    fields: tuple = ()


# =============================================================================
# NAME MAPPING TABLE
# =============================================================================

WORDPRESS_FIELDS = (
    "Aktualna wersja Wordpressa? <= WordPress version",
    "Domyślny motyw WordPressa <= WordPress default theme",
    "Stare domyślne motywy WordPressa <= Old WordPress default themes",
    "Włączony skrypt Emoji WordPress <= WordPress Emoji Script",
    "Biblioteka bloków WordPress Gutenberg <= WordPress Gutenberg Block Library",
    "Włączony Gravatar <= Gravatar",
    "Wtyczki, które nie były dalej rozwijane od ponad roku? <= Are plugins used that have not been further developed for more than a year?",
)

SECURITY_FIELDS = (
    "Plik debug.log WordPress jest widoczny? <= WordPress debug.log file viewable?",
    "Wersja WordPressa widoczna publicznie? <= WordPress version publicly visible?",
    "API REST WordPress publicznie dostępne? <= WordPress REST API publicly available?",
    "Nagłówek Content-Security-Policy <= Content-Security-Policy-Header",
    "Nagłówek Access-Control-Allow-Methods <= Access-Control-Allow-Methods-Header",
    "Nagłówek Access-Control-Allow-Origins <= Access-Control-Allow-Origins-Header",
    "Nagłówek Strict-Transport-Security <= Strict-Transport-Security-Header",
    "Nagłówek Expect-CT <= Expect-CT-Header",
    "Nagłówek Permissions-Policy <= Permissions-Policy-Header",
    "Nagłówek Feature-Policy <= Feature-Policy-Header",
    "Nagłówek Referrer-Policy <= Referrer-Policy-Header",
    "Nagłówek X-Content-Type-Options <= X-Content-Type-Options-Header",
    "Nagłówek X-Frame-Options <= X-Frame-Options-Header",
    "Nagłówek X-XSS-Protection <= X-XSS-Protection-Header",
)

GDPR_FIELDS = (
    "Czy jest używany Gravatar? <= Is Gravatar used?",
    "Czy czcionki Google są ładowane z serwerów Google bez zgody? <= Are Google fonts loaded from Google servers without consent?",
    "Czy Google Analytics jest ładowany bez zgody? <= Is Google Analytics loaded without consent?",
    "Czy Mapy Google są ładowane bez zgody? <= Is Google Maps loaded without consent?",
    "Czy Facebook Pixel jest ładowany bez zgody? <= Is Facebook Pixel loaded without consent?",
    "Czy Facebook JavaScript SDK jest ładowany bez zgody? <= Is the Facebook JavaScript SDK loading without consent?",
    "Czy Font Awesome ładuje się z serwerów Font Awesome? <= Does Font Awesome load from the Font Awesome servers?",
    "Czy Font Awesome ładuje się z serwerów Cloudflare? <= Does Font Awesome load from the Cloudflare servers?",
    "Czy czcionki Adobe są ładowane z serwerów Typekit bez zgody? <= Are Adobe fonts loaded from Typekit servers without consent?",
    "Czy Mailchimp jest ładowany z ich serwerów bez zgody? <= Is Mailchimp loaded from their servers without consent?",
    "Czy Intercom jest ładowany bez zgody? <= Is Intercom loaded without consent?",
    "Czy używana jest wtyczka Akismet Anti-Spam? <= Is plugin Akismet Anti-Spam used?",
    "Czy używana jest wtyczka Jetpack? <= Is plugin Jetpack used?",
    "Czy używana jest Google Recaptcha? <= Is Google Recaptcha used?",
    "Czy używane są oficjalne przyciski udostępniania Xing? <= Are the official Xing share buttons used?",
    "Czy jQuery jest ładowane z Google Server/CDN? <= Is jQuery loaded from Google Server/CDN?",
    "Czy jQuery jest ładowane z Microsoft Server/CDN? <= Is jQuery loaded from Microsoft Server/CDN?",
    "Czy czcionki są ładowane z serwerów myfonts.net? <= Are fonts loaded from the myfonts.net servers?",
)

SEO_FIELDS = (
    "Liczba obrazów z atrybutem alt <= Number of images with alt attribute",
    "Liczba obrazów bez atrybutu alt <= Number of images without alt attribute",
    "Liczba znaków w tytule <= Title character count",
    "Liczba znaków meta opisu <= Meta Description character count",
    "Kanoniczny adres URL <= Canonical URL",
    "Robots",
    "Znaleziono wiele meta robotów? <= Found multiple meta robots?",
    "Znaleziono wiele tytułów? <= Found multiple titles?",
    "Znaleziono wiele meta opisów? <= Found multiple meta descriptions?",
    "Meta słowa kluczowe w kodzie źródłowym <= Meta Keywords in source code",
    "Znaleziono wiele nagłówków h1? <= Found multiple h1 headings?",
    "Mapa witryny XML <= XML Sitemap",
    "Używana jest wtyczka WordPress SEO? <= Using a WordPress SEO Plugin?",
    "Czy wszystkie warianty protokołu HTTP są przekierowywane do jednego wariantu?",
)

# English halves are the badge labels searched for in the HTML section
HTML_FIELDS = (
    "Doctype",
    "Czy jest użyte HTML5? <= Is HTML5 used?",
    "Widok <= Viewport",
    "Przestarzałe znaczniki HTML <= Deprecated HTML",
    "Favicon",
    "Ikona Apple Touch URL <= Apple Touch Icon URL",
)

CONTENT_FIELDS = (
    "Hierarchia nagłówków",
)

PERFORMANCE_FIELDS = (
    "Wersja HTTP <= HTTP version",
    "Kompresja <= Compression",
)

SECTIONS = (
    Section("wordpress", "#sectionWordpress", STRATEGY_GENERIC_TABLE, WORDPRESS_FIELDS),
    Section("security", "#sectionSecurity", STRATEGY_GENERIC_TABLE, SECURITY_FIELDS),
    Section("gdpr", "#sectionGdpr", STRATEGY_GENERIC_TABLE, GDPR_FIELDS),
    Section("seo", "#sectionSeo", STRATEGY_GENERIC_TABLE, SEO_FIELDS),
    Section("html", "#sectionHtml", STRATEGY_HTML_BADGES, HTML_FIELDS),
    Section("content", "#sectionContent", STRATEGY_CONTENT_HEADING, CONTENT_FIELDS),
    Section("performance", "#sectionPerformance", STRATEGY_GENERIC_TABLE, PERFORMANCE_FIELDS),
    Section("tools", "#sectionTools", STRATEGY_TOOLS_LISTING),
)


def split_field_name(field_name: str) -> tuple[str, str]:
    """Split a mapping entry into its (Polish, English) names.

    Entries without an English half use the same label for both.
    """
    if NAME_SEPARATOR in field_name:
        pl_name, en_name = field_name.split(NAME_SEPARATOR, 1)
        return pl_name, en_name
    return field_name, field_name


def get_sections() -> tuple:
    """Return the sections in report order."""
    return SECTIONS


def get_section_selectors() -> list[str]:
    """CSS anchors of every section, in report order."""
    return [s.selector for s in SECTIONS]


def get_section(selector: str) -> Section | None:
    for section in SECTIONS:
        if section.selector == selector:
            return section
    return None

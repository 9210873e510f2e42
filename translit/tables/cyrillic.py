"""Cyrillic (Russian, Ukrainian, Belarusian, Bulgarian, Serbian) to plain Latin."""

# Lowercase letters; uppercase forms are derived
CYRILLIC_TO_LATIN = {
    'а': 'a', 'б': 'b', 'в': 'v', 'г': 'g', 'д': 'd', 'е': 'e', 'ё': 'yo',
    'ж': 'zh', 'з': 'z', 'и': 'i', 'й': 'y', 'к': 'k', 'л': 'l', 'м': 'm',
    'н': 'n', 'о': 'o', 'п': 'p', 'р': 'r', 'с': 's', 'т': 't', 'у': 'u',
    'ф': 'f', 'х': 'kh', 'ц': 'ts', 'ч': 'ch', 'ш': 'sh', 'щ': 'shch',
    'ъ': '', 'ы': 'y', 'ь': '', 'э': 'e', 'ю': 'yu', 'я': 'ya',
    # Ukrainian specific
    'і': 'i', 'ї': 'yi', 'є': 'ye', 'ґ': 'g',
    # Belarusian
    'ў': 'w',
    # Serbian
    'ђ': 'dj', 'ј': 'j', 'љ': 'lj', 'њ': 'nj', 'ћ': 'c', 'џ': 'dz',
}

# Multi-letter clusters read differently from their parts
CLUSTERS = {'ый': 'y', 'ье': 'ye', 'ъе': 'ye'}

LANGUAGES = ["ru", "uk", "be", "bg", "sr"]


def _capitalize(pattern: str, fragment: str) -> tuple[str, str]:
    return pattern[:1].upper() + pattern[1:], fragment[:1].upper() + fragment[1:]


def cyrillic_rules() -> list[tuple[str, str]]:
    rules: list[tuple[str, str]] = []
    for table in (CYRILLIC_TO_LATIN, CLUSTERS):
        for pattern, fragment in table.items():
            rules.append((pattern, fragment))
            rules.append(_capitalize(pattern, fragment))
            if len(pattern) > 1:
                rules.append((pattern.upper(), fragment.upper()))
    return rules

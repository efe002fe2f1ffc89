import json
from pathlib import Path

# Define o caminho base para os arquivos de tradução
LOCALES_PATH = Path(__file__).parent / "localization"
# Dicionário para armazenar as traduções carregadas
_TRANSLATIONS = {}
# Idioma padrão
DEFAULT_LOCALE = "en"


def load_translations():
    """Carrega todos os arquivos JSON de tradução para a memória."""
    for file_path in LOCALES_PATH.glob("*.json"):
        locale_name = file_path.stem  # Nome do arquivo sem extensão (ex: 'es', 'en')
        with open(file_path, 'r', encoding='utf-8') as f:
            _TRANSLATIONS[locale_name] = json.load(f)


def normalize_locale(accept_language: str | None) -> str:
    """Converte o primeiro idioma do header Accept-Language (ex.: 'es-PE,en;q=0.9' -> 'es')."""
    if not accept_language:
        return DEFAULT_LOCALE
    tag = accept_language.split(',')[0].split(';')[0].strip().lower()
    return tag.replace('-', '_').split('_')[0] or DEFAULT_LOCALE


def get_translator(locale: str):
    """
    Retorna a função de tradução para a localidade especificada.
    Se o locale não for encontrado, usa o idioma padrão.
    """
    if not _TRANSLATIONS:
        load_translations()

    default_dict = _TRANSLATIONS.get(DEFAULT_LOCALE, {})
    translation_dict = _TRANSLATIONS.get(locale.lower(), default_dict)

    def translate(key: str, **kwargs) -> str:
        """Função principal de tradução."""
        # Chave ausente no locale cai para o padrão e, por fim, para a própria chave
        message = translation_dict.get(key) or default_dict.get(key, key)
        try:
            return message.format(**kwargs)
        except (KeyError, IndexError):
            return message

    return translate

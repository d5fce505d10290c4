"""Static UI strings for every supported language."""

DEFAULT_LANGUAGE = "en"

SUPPORTED_LANGUAGES = [
    {"code": "en", "name": "English", "short_name": "EN", "flag": "🇺🇸"},
    {"code": "es", "name": "Español", "short_name": "ES", "flag": "🇪🇸"},
    {"code": "fr", "name": "Français", "short_name": "FR", "flag": "🇫🇷"},
    {"code": "de", "name": "Deutsch", "short_name": "DE", "flag": "🇩🇪"},
    {"code": "pt", "name": "Português", "short_name": "PT", "flag": "🇧🇷"},
    {"code": "ja", "name": "日本語", "short_name": "JA", "flag": "🇯🇵"},
]

TRANSLATIONS = {
    "en": {
        "title": "YouTube Thumbnail Downloader",
        "description": "Download YouTube video thumbnails in every available size, free and instantly.",
        "form": {
            "title": "Enter a YouTube URL",
            "description": "Paste a video link to get its thumbnails",
            "placeholder": "https://www.youtube.com/watch?v=...",
            "button": "Get Thumbnails",
            "processing": "Processing...",
        },
        "errors": {
            "invalid_url": "Please enter a valid YouTube URL",
            "extract_id": "Could not extract the video ID from the URL",
            "processing": "An error occurred while processing the URL",
        },
        "results": {"title": "Thumbnails"},
        "video_id": "Video ID",
        "thumbnails": {
            "download": "Download",
            "preview": "Preview",
            "sizes": "Available sizes",
        },
        "download_by_size": {"title": "Download by size"},
        "additional_types": {
            "profile": "Profile picture",
            "cover": "Cover image",
        },
        "footer": {
            "copyright": "© YouTube Thumbnail Downloader. All rights reserved.",
            "disclaimer": "This tool is not affiliated with YouTube. Thumbnails belong to their respective owners.",
        },
    },
    "es": {
        "title": "Descargador de miniaturas de YouTube",
        "description": "Descarga las miniaturas de videos de YouTube en todos los tamaños, gratis y al instante.",
        "form": {
            "title": "Introduce una URL de YouTube",
            "description": "Pega el enlace de un video para obtener sus miniaturas",
            "placeholder": "https://www.youtube.com/watch?v=...",
            "button": "Obtener miniaturas",
            "processing": "Procesando...",
        },
        "errors": {
            "invalid_url": "Introduce una URL de YouTube válida",
            "extract_id": "No se pudo extraer el ID del video de la URL",
            "processing": "Se produjo un error al procesar la URL",
        },
        "results": {"title": "Miniaturas"},
        "video_id": "ID del video",
        "thumbnails": {
            "download": "Descargar",
            "preview": "Vista previa",
            "sizes": "Tamaños disponibles",
        },
        "download_by_size": {"title": "Descargar por tamaño"},
        "additional_types": {
            "profile": "Foto de perfil",
            "cover": "Imagen de portada",
        },
        "footer": {
            "copyright": "© Descargador de miniaturas de YouTube. Todos los derechos reservados.",
            "disclaimer": "Esta herramienta no está afiliada a YouTube. Las miniaturas pertenecen a sus respectivos propietarios.",
        },
    },
    "fr": {
        "title": "Téléchargeur de miniatures YouTube",
        "description": "Téléchargez les miniatures des vidéos YouTube dans toutes les tailles, gratuitement et instantanément.",
        "form": {
            "title": "Saisissez une URL YouTube",
            "description": "Collez le lien d'une vidéo pour obtenir ses miniatures",
            "placeholder": "https://www.youtube.com/watch?v=...",
            "button": "Obtenir les miniatures",
            "processing": "Traitement...",
        },
        "errors": {
            "invalid_url": "Veuillez saisir une URL YouTube valide",
            "extract_id": "Impossible d'extraire l'identifiant de la vidéo depuis l'URL",
            "processing": "Une erreur est survenue lors du traitement de l'URL",
        },
        "results": {"title": "Miniatures"},
        "video_id": "ID de la vidéo",
        "thumbnails": {
            "download": "Télécharger",
            "preview": "Aperçu",
            "sizes": "Tailles disponibles",
        },
        "download_by_size": {"title": "Télécharger par taille"},
        "additional_types": {
            "profile": "Photo de profil",
            "cover": "Image de couverture",
        },
        "footer": {
            "copyright": "© Téléchargeur de miniatures YouTube. Tous droits réservés.",
            "disclaimer": "Cet outil n'est pas affilié à YouTube. Les miniatures appartiennent à leurs propriétaires respectifs.",
        },
    },
    "de": {
        "title": "YouTube Thumbnail Downloader",
        "description": "Lade Vorschaubilder von YouTube-Videos in allen verfügbaren Größen herunter, kostenlos und sofort.",
        "form": {
            "title": "YouTube-URL eingeben",
            "description": "Füge einen Videolink ein, um seine Vorschaubilder zu erhalten",
            "placeholder": "https://www.youtube.com/watch?v=...",
            "button": "Vorschaubilder abrufen",
            "processing": "Wird verarbeitet...",
        },
        "errors": {
            "invalid_url": "Bitte gib eine gültige YouTube-URL ein",
            "extract_id": "Die Video-ID konnte nicht aus der URL gelesen werden",
            "processing": "Beim Verarbeiten der URL ist ein Fehler aufgetreten",
        },
        "results": {"title": "Vorschaubilder"},
        "video_id": "Video-ID",
        "thumbnails": {
            "download": "Herunterladen",
            "preview": "Vorschau",
            "sizes": "Verfügbare Größen",
        },
        "download_by_size": {"title": "Nach Größe herunterladen"},
        "additional_types": {
            "profile": "Profilbild",
            "cover": "Titelbild",
        },
        "footer": {
            "copyright": "© YouTube Thumbnail Downloader. Alle Rechte vorbehalten.",
            "disclaimer": "Dieses Tool steht in keiner Verbindung zu YouTube. Die Vorschaubilder gehören ihren jeweiligen Eigentümern.",
        },
    },
    "pt": {
        "title": "Baixador de miniaturas do YouTube",
        "description": "Baixe as miniaturas de vídeos do YouTube em todos os tamanhos, grátis e na hora.",
        "form": {
            "title": "Digite uma URL do YouTube",
            "description": "Cole o link de um vídeo para obter as miniaturas",
            "placeholder": "https://www.youtube.com/watch?v=...",
            "button": "Obter miniaturas",
            "processing": "Processando...",
        },
        "errors": {
            "invalid_url": "Digite uma URL do YouTube válida",
            "extract_id": "Não foi possível extrair o ID do vídeo da URL",
            "processing": "Ocorreu um erro ao processar a URL",
        },
        "results": {"title": "Miniaturas"},
        "video_id": "ID do vídeo",
        "thumbnails": {
            "download": "Baixar",
            "preview": "Pré-visualização",
            "sizes": "Tamanhos disponíveis",
        },
        "download_by_size": {"title": "Baixar por tamanho"},
        "additional_types": {
            "profile": "Foto de perfil",
            "cover": "Imagem de capa",
        },
        "footer": {
            "copyright": "© Baixador de miniaturas do YouTube. Todos os direitos reservados.",
            "disclaimer": "Esta ferramenta não é afiliada ao YouTube. As miniaturas pertencem aos seus respectivos donos.",
        },
    },
    "ja": {
        "title": "YouTube サムネイル ダウンローダー",
        "description": "YouTube 動画のサムネイルをすべてのサイズで無料ですぐにダウンロードできます。",
        "form": {
            "title": "YouTube の URL を入力",
            "description": "動画のリンクを貼り付けるとサムネイルを取得できます",
            "placeholder": "https://www.youtube.com/watch?v=...",
            "button": "サムネイルを取得",
            "processing": "処理中...",
        },
        "errors": {
            "invalid_url": "有効な YouTube の URL を入力してください",
            "extract_id": "URL から動画 ID を取得できませんでした",
            "processing": "URL の処理中にエラーが発生しました",
        },
        "results": {"title": "サムネイル"},
        "video_id": "動画 ID",
        "thumbnails": {
            "download": "ダウンロード",
            "preview": "プレビュー",
            "sizes": "利用可能なサイズ",
        },
        "download_by_size": {"title": "サイズ別ダウンロード"},
        "additional_types": {
            "profile": "プロフィール画像",
            "cover": "カバー画像",
        },
        "footer": {
            "copyright": "© YouTube サムネイル ダウンローダー. All rights reserved.",
            "disclaimer": "このツールは YouTube とは関係ありません。サムネイルの権利は各所有者に帰属します。",
        },
    },
}


def is_supported(code):
    return code in TRANSLATIONS


def get_translations(code):
    """Return the string table for a language, English when it is not supported."""
    return TRANSLATIONS.get(code) or TRANSLATIONS[DEFAULT_LANGUAGE]

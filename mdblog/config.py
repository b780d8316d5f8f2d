from typing import Optional

from mdblog.schemas.blog import BlogConfig
from mdblog.settings import Settings, settings


def get_default_config(current_settings: Optional[Settings] = None) -> BlogConfig:
    """Build the site config from environment-backed settings."""
    s = current_settings or settings
    return BlogConfig(
        siteName=s.SITE_NAME,
        siteUrl=s.site_url,
        defaultAuthor=s.DEFAULT_AUTHOR or None,
        twitterHandle=s.TWITTER_HANDLE or None,
        defaultOgImage=s.DEFAULT_OG_IMAGE or None,
        defaultLang=s.DEFAULT_LANG,
        authors=s.AUTHORS,
        alternateLanguages=s.ALTERNATE_LANGUAGES,
    )


def create_config(current_settings: Optional[Settings] = None, **overrides) -> BlogConfig:
    """
    Merge explicit site values onto the defaults.

    An empty or missing ``siteUrl`` falls back to ``SITE_URL`` and then to
    ``http://localhost:3000``.
    """
    defaults = get_default_config(current_settings)
    merged = {**defaults.model_dump(), **overrides}
    if not merged.get("siteUrl"):
        merged["siteUrl"] = defaults.siteUrl
    return BlogConfig(**merged)


def resolve_config(config: Optional[BlogConfig]) -> BlogConfig:
    return config if config is not None else get_default_config()

"""Application creators -- one per selectable application type.

Quick usage::

    from create_ec_app.creators import get_creator
    from create_ec_app.models import AppType

    creator_cls = get_creator(AppType.POWERPAGES)
    options = creator_cls.prompt_options("my-site", theme="fluent")
    project_path = await creator_cls(options).create()
"""

from create_ec_app.creators.base import (
    BaseCreator,
    CommandError,
    CreatorError,
    TargetExistsError,
    TemplateFile,
)
from create_ec_app.creators.mobile import MobileCreator
from create_ec_app.creators.portal import PortalCreator
from create_ec_app.creators.powerpages import PowerPagesCreator
from create_ec_app.creators.webresource import WebResourceCreator
from create_ec_app.models import AppType

CREATORS: dict[AppType, type[BaseCreator]] = {
    AppType.WEBRESOURCE: WebResourceCreator,
    AppType.PORTAL: PortalCreator,
    AppType.POWERPAGES: PowerPagesCreator,
    AppType.MOBILE: MobileCreator,
}


def get_creator(app_type: AppType | str) -> type[BaseCreator]:
    """Return the creator class for *app_type*.

    Raises:
        CreatorError: If the value is not a known application type.
    """
    try:
        return CREATORS[AppType(app_type)]
    except (KeyError, ValueError):
        raise CreatorError(f"Unknown app type: {app_type}") from None


__all__ = [
    "BaseCreator",
    "CREATORS",
    "CommandError",
    "CreatorError",
    "MobileCreator",
    "PortalCreator",
    "PowerPagesCreator",
    "TargetExistsError",
    "TemplateFile",
    "WebResourceCreator",
    "get_creator",
]

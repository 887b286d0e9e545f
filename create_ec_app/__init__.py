"""create-ec-app -- scaffold preconfigured applications for the EC ecosystem.

Quick usage::

    from create_ec_app.config import CreatorConfig
    from create_ec_app.creators import get_creator

    creator_cls = get_creator("portal")
    creator = creator_cls(creator_cls.prompt_options("my-portal"), CreatorConfig())
    project_path = await creator.create()
"""

__version__ = "1.0.0"

from .interface import launch_app

launch_app()

# module gympay.app
from gympay.app_setup.factory import create_app

# App globale
app = create_app()

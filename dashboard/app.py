# module dashboard.app
from dashboard.app_setup.factory import create_app

# App globale
app = create_app()

"""Basic usage examples"""

from typing import List

from pydantic import BaseModel

from ron_settings import NotFoundError, Settings
from ron_settings.observability import setup_logging


class Server(BaseModel):
    host: str = "localhost"
    port: int = 8080


class Config(BaseModel):
    name: str = "demo"
    servers: List[Server] = []


setup_logging(level="DEBUG")

# Looks at BAR-APP_CONFIG_PATH, ./settings.ron, then the platform config dir
try:
    settings = Settings.load(Config, "com", "Foo-Corp", "Bar-App")
except NotFoundError as e:
    print(f"No settings yet, looked in: {e.candidates}")
    raise SystemExit(1)

# Fields are read and written straight through the handle
settings.name = "production"
settings.servers.append(Server(host="example.com", port=443))
settings.save()

print(settings.path.read_text())

import pytest
from omegaconf import OmegaConf


@pytest.fixture
def app_cfg():
    return OmegaConf.create(
        {
            "run": {"recipients": ["+15550100", "+15550101"], "message": "hello"},
            "theme": {"name": "bootstrap"},
            "devices": {"name": "apple"},
            "query": {
                "dialect": "mysql",
                "table": "posts",
                "columns": ["id", "title"],
                "limit": 5,
                "where": None,
                "order_by": None,
            },
            "notifier": {"name": "sms", "port": 404},
            "database": {"provider": "static", "url": "mysql://db:3306/app", "api_key": "SomeApiKey"},
            "logging": {"level": "WARNING"},
        }
    )

import uvicorn
from config import ApplicationConfig, validate_auth_config
from auth_core.api.app import create_app

validate_auth_config(ApplicationConfig)

app = create_app(ApplicationConfig)

if __name__ == "__main__":
    uvicorn.run(
        "api:app",
        host=ApplicationConfig.API_HOST,
        port=ApplicationConfig.API_PORT,
        reload=True,
        log_level=ApplicationConfig.LOG_LEVEL.lower(),
    )

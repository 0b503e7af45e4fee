import os
import uvicorn
from email_builder.core.config import get_settings

def main():
    settings = get_settings()

    # Ensure necessary directories exist
    os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
    os.makedirs(settings.DOWNLOADS_DIR, exist_ok=True)

    uvicorn.run(
        "email_builder.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="info"
    )

if __name__ == "__main__":
    main()

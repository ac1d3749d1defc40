"""`python -m safebox` — uvicorn으로 API 서버 실행 (Run the API server under uvicorn)."""

import uvicorn

from safebox.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "safebox.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.ENVIRONMENT == "development",
    )

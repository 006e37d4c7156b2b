# run.py

import uvicorn
from uasift.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "uasift.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        workers=1,
    )

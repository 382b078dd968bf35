import uvicorn

from archive_api.core.config import PORT

if __name__ == "__main__":
    uvicorn.run("archive_api.main:app", host="0.0.0.0", port=PORT)

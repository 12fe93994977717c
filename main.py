import uvicorn

from contacts_api.config import HOST, PORT

if __name__ == "__main__":
    uvicorn.run("contacts_api.main:app", host=HOST, port=PORT)

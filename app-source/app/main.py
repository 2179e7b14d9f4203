from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

GREETING = "Hello, World!"
WELCOME = {"message": "Welcome to the API!"}

app = FastAPI(title="Hello API", docs_url=None, redoc_url=None, openapi_url=None)

@app.get("/", response_class=PlainTextResponse)
def root():
    return GREETING

@app.get("/api")
def api():
    return WELCOME

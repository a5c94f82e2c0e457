"""Hello World — the simplest torchflower app.

Demonstrates exact-match routes, sync and async handlers, return-value
negotiation, and a custom error hook.

Run:
    python app.py
"""

from torchflower import App, Response

app = App()


@app.get("/")
async def index(request):
    return Response("Hello, World!")


@app.get("/api/status")
def status(request):
    return {"status": "ok", "version": "0.1.0"}


@app.post("/custom")
def custom(request):
    return Response("Created").with_status(201).with_header("X-Custom", "torchflower")


@app.get("/boom")
def boom(request):
    msg = "handler exploded"
    raise RuntimeError(msg)


@app.error_handler
def on_error(exc: Exception) -> Response:
    return Response(f"Something broke: {exc}", status=500)


if __name__ == "__main__":
    app.run(on_listen=lambda: print("Serving on port 3000!"))

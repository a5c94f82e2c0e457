"""Task intake — validating a JSON body with guards.

POST /task accepts ``{"name": str, "priority": "Critical"|"Medium"|"Low"}``
plus an optional ``note`` string. Anything else is a 400.

POST /task/unchecked runs the same guard *without* ``guard.check()``:
a bad body raises, and the error hook answers 500.

Run:
    python app.py
"""

import logging

from torchflower import App, Response, guard

logger = logging.getLogger(__name__)

app = App()

is_priority = guard.or_(
    guard.string_literal("Critical"),
    guard.or_(guard.string_literal("Medium"), guard.string_literal("Low")),
)

task_shape = guard.record(
    lambda value: {
        "name": guard.string(value["name"]),
        "priority": is_priority(value["priority"]),
        "note": guard.optional(guard.string)(value["note"]),
    }
)

is_task = guard.check(task_shape)

tasks: list[dict] = []


@app.post("/task")
async def create_task(request):
    try:
        payload = await request.json()
    except ValueError:
        return Response("400 Bad Request", status=400)

    task = is_task(payload)
    if task is None:
        return Response("400 Bad Request", status=400)

    logger.info("New task received: %s (%s)", task["name"], task["priority"])
    tasks.append(task)
    return Response("200 OK")


@app.post("/task/unchecked")
async def create_task_unchecked(request):
    task = task_shape(await request.json())
    tasks.append(task)
    return Response("200 OK")


@app.get("/tasks")
def list_tasks(request):
    return tasks


if __name__ == "__main__":
    app.run(on_listen=lambda: print("Listening on port 3000!"))

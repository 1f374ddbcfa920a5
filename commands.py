from Crypto.Random import get_random_bytes

from evoting.config import HOST, PORT
from evoting.gentests import dump_test_data
import sys


def init_commands():
    method = sys.argv[1] if len(sys.argv) > 1 else None
    methods = {
        "gentests": gentests,
        "serve": serve,
    }
    if method not in methods:
        print(f"Unknown method: {method}. Available methods: {', '.join(methods.keys())}")
        return

    methods[method](*sys.argv[2:])


def gentests(path: str = None):
    test_data = dump_test_data(get_random_bytes)
    if path is None:
        print(test_data)
        return

    with open(path, "w") as test_file:
        test_file.write(test_data)
    print(f"Test data written to {path}")


def serve(host: str = HOST, port: str = PORT):
    import uvicorn

    # the app configures loguru when evoting.main is imported
    uvicorn.run("evoting.main:app", host=host, port=int(port))


if __name__ == "__main__":
    init_commands()

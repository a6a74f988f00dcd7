# scripts/run_canary_suite.py

import sys
from pathlib import Path

# Ensure project root is on the path when running this script directly
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import getpass
import os
import socket
import tempfile
import threading

from canary.application.action_dispatcher import ActionDispatcher
from canary.domain.models.invocation import InvocationContext
from canary.infrastructure.audit_log.jsonl_repository import JsonlAuditRepository


def serve_once(server):
    conn, _ = server.accept()
    with conn:
        while conn.recv(4096):
            pass


def run(argv, log_file):
    context = InvocationContext(
        program_name="run_canary_suite",
        argv=tuple(argv),
        pid=os.getpid(),
        username=getpass.getuser(),
        log_file=str(log_file),
    )
    result = ActionDispatcher(context).run()
    print(" ".join(argv), "->", result or "ok")


def main():
    with tempfile.TemporaryDirectory() as scratch:
        scratch = Path(scratch)
        log_file = scratch / "activity.log"
        target = scratch / "canary.txt"

        server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        server.bind(("127.0.0.1", 0))
        server.listen(1)
        port = str(server.getsockname()[1])
        listener = threading.Thread(target=serve_once, args=(server,), daemon=True)
        listener.start()

        run(["file", "create", str(target)], log_file)
        run(["file", "modify", str(target), "tweet"], log_file)
        run(["file", "delete", str(target)], log_file)
        run(["proc", "uname", "-a"], log_file)
        run(["net", "tcp", "127.0.0.1", port, "hello", "there"], log_file)
        run(["net", "udp", "127.0.0.1", port, "ab", "cd"], log_file)
        run(["version"], log_file)

        listener.join(timeout=5)
        server.close()

        for record in JsonlAuditRepository(log_file).read_records():
            print(record.model_dump_json())


main()

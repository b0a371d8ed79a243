#!/usr/bin/env python3
"""Start the complaint backend in a separate process."""
import subprocess
import time
import sys
import os
import signal
import requests
import argparse
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from complainthub.config import SERVICE_PORTS

SERVICES = [
    "complaint",
]

processes = []


def start_services():
    """Start all services in background."""
    services_base_dir = project_root / "services"

    # Set PYTHONPATH to include project root
    env = os.environ.copy()
    env['PYTHONPATH'] = str(project_root)

    print("🚀 Starting services...")
    print("-" * 60)

    for service_name in SERVICES:
        service_path = services_base_dir / service_name / "service.py"
        if not service_path.exists():
            print(f"⚠️  Warning: No service.py found for {service_name}, skipping...")
            continue

        port = SERVICE_PORTS.get(service_name)
        print(f"Starting {service_name:12} on port {port}...")

        log_dir = project_root / "logs"
        log_dir.mkdir(exist_ok=True)
        stdout_log = log_dir / f"{service_name}_stdout.log"
        stderr_log = log_dir / f"{service_name}_stderr.log"

        env['PORT'] = str(port)
        proc = subprocess.Popen(
            [sys.executable, str(service_path)],
            stdout=open(stdout_log, 'w'),
            stderr=open(stderr_log, 'w'),
            cwd=str(project_root),
            env=env
        )
        processes.append((service_name, port, proc))
        time.sleep(0.5)

    print("-" * 60)
    print(f"✅ Started {len(processes)} services")
    print("\nService endpoints:")
    for name, port, _ in processes:
        print(f"  {name:15} → http://localhost:{port}/api/complaints")
    print("\nPress Ctrl+C to stop all services")


def shutdown_services(signum=None, frame=None):
    """Stop all services gracefully."""
    print("\n🛑 Shutting down services...")
    for name, port, proc in processes:
        print(f"Stopping {name}...")
        proc.terminate()
        try:
            proc.wait(timeout=3)
        except subprocess.TimeoutExpired:
            proc.kill()
    print("✅ All services stopped")
    if signum is not None:
        sys.exit(0)


def kill_all_services():
    """Kill all running services by process name."""
    print("🛑 Killing all services...")
    for service in SERVICES:
        result = subprocess.run(
            ["pkill", "-f", f"python.*services/{service}/service.py"],
            check=False,
            capture_output=True
        )
        if result.returncode == 0:
            print(f"  ✓ Killed {service}")
        else:
            print(f"  - {service} was not running")
    print("✅ All services killed")


def check_health():
    """Check if services are responding."""
    time.sleep(2)

    print("\n🔍 Health check...")
    healthy = 0
    for name, port, proc in processes:
        try:
            resp = requests.get(f"http://localhost:{port}/health", timeout=2)
            if resp.status_code == 200:
                healthy += 1
                print(f"  ✓ {name}")
            else:
                print(f"  ✗ {name} (HTTP {resp.status_code})")
        except requests.exceptions.RequestException as e:
            print(f"  ✗ {name} ({e})")

    print(f"\n{healthy}/{len(processes)} services healthy")
    return healthy == len(processes)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        description="Manage the complaint backend",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python3 start_services.py start      # Start the backend
  python3 start_services.py stop       # Stop the backend
  python3 start_services.py restart    # Restart the backend
  python3 start_services.py            # Default: start
        """
    )
    parser.add_argument(
        "command",
        nargs="?",
        default="start",
        choices=["start", "stop", "restart"],
        help="Command to execute (default: start)"
    )

    args = parser.parse_args()

    if args.command == "stop":
        kill_all_services()
        sys.exit(0)

    elif args.command == "restart":
        kill_all_services()
        print("\n⏳ Waiting for processes to terminate...")
        time.sleep(2)

    # Register signal handlers for graceful shutdown
    signal.signal(signal.SIGINT, shutdown_services)
    signal.signal(signal.SIGTERM, shutdown_services)

    try:
        start_services()

        if check_health():
            print("\n✅ All services are healthy and ready!")
        else:
            print("\n⚠️  Some services failed health check")

        print("\nServices running... (Ctrl+C to stop)")
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        shutdown_services()

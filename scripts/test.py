import subprocess
import sys


def main():
    cmd = [sys.executable, "-m", "pytest", "tests", *sys.argv[1:]]
    sys.exit(subprocess.run(cmd, check=False).returncode)


if __name__ == "__main__":
    main()

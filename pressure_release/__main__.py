import sys

from pressure_release.release import solve

if __name__ == "__main__":
    print(solve(*sys.argv[1:2]))

import os

# Store testdir for safe switch back to directory:
testdir = os.path.dirname(os.path.abspath(__file__))


def relpath(*args):
    return os.path.normpath(os.path.join(testdir, *args))


def source_files(folder, extension):
    for filename in sorted(os.listdir(folder)):
        if filename.endswith(extension):
            yield os.path.join(folder, filename)

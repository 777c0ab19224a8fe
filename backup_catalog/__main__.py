from .main import script_entrypoint


if __name__ == '__main__':
    script_entrypoint()

from circuit_grow.cli import app

if __name__ == "__main__":
    app()

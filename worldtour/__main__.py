from .app import create_app

# -----------------------------
# RUN
# -----------------------------
if __name__ == "__main__":
    app = create_app()
    app.run(debug=False)

from src.timeclock_analytics.timeclock_analytics.main import create_app

app = create_app()


if __name__ == "__main__":
    app.run(debug=app.config["DEBUG"])

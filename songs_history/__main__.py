from songs_history.main import main

if __name__ == "__main__":
    raise SystemExit(main())

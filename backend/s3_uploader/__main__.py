from s3_uploader.main import run

if __name__ == "__main__":
    run()

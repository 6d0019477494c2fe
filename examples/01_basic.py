"""
Basic usage - Upload a file and print its URL
"""
import os
from cldpy import dial


def main():
    with dial(os.environ["CLOUDINARY_URL"]) as cld:
        results = cld.upload_image("images/logo.png")
        for result in results:
            print(f"Uploaded {result.public_id}")
            print(f"  {cld.url(result.public_id)}")


if __name__ == "__main__":
    main()

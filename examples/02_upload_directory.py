"""
Upload a static directory, protecting some files from deletion
"""
import os
from cldpy import CloudClient, ResourceType


def main():
    with CloudClient(os.environ["CLOUDINARY_URL"], keep_files="^static/fonts/") as cld:
        # Dry run first
        cld.simulate = True
        for result in cld.upload("static", prepend="static", resource_type=ResourceType.RAW):
            print(f"Would upload {result.path} as {result.public_id}")

        cld.simulate = False
        cld.verbose = True
        results = cld.upload("static", prepend="static", resource_type=ResourceType.RAW)
        print(f"Uploaded {sum(not r.skipped for r in results)} files")

        # Kept by the pattern, nothing is sent
        cld.delete("fonts/main", prepend="static/", resource_type=ResourceType.RAW)


if __name__ == "__main__":
    main()

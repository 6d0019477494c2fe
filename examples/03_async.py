"""
Async usage - Upload, rename and list
"""
import asyncio
import os
from cldpy import AsyncCloudClient


async def main():
    async with AsyncCloudClient(os.environ["CLOUDINARY_URL"]) as cld:
        await cld.upload_image("images/logo.png", prepend="demo")
        await cld.rename("images/logo", "images/brand", prepend="demo/")

        page = await cld.list_resources()
        for resource in page.resources:
            print(f"  {resource.public_id} ({resource.size_bytes} bytes)")
        if page.has_more:
            print(f"More: {page.next_cursor}")


if __name__ == "__main__":
    asyncio.run(main())

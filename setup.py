from setuptools import setup, find_packages

setup(
    name="weather-mcp-server",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "google-adk>=1.5.0",
        "aiohttp>=3.8.0",
        "mcp>=1.10.0,<2",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
    entry_points={
        "console_scripts": [
            "weather-mcp-server=weather_mcp_server.weather_server:main",
        ],
    },
    python_requires=">=3.10",
)

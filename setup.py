from setuptools import setup, find_packages

setup(
    name="tls-usersig",
    version="0.1.0",
    description="TLS UserSig (v2.0) generation for real-time communication backends",
    python_requires=">=3.8",
    packages=find_packages(include=["tls_usersig*"]),
    install_requires=[],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "python-dotenv>=1.0",
        ],
    },
    license="MIT",
    keywords=["usersig", "tls-sig", "trtc", "tencent", "hmac"],
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Topic :: Security :: Cryptography",
    ],
)

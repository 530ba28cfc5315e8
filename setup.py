from setuptools import find_packages, setup


def main():
    version = "1.0.0"
    packages = find_packages(include=["hitbtc_connector", "hitbtc_connector.*"])
    package_data = {
        "hitbtc_connector": [
            "VERSION",
        ],
    }
    install_requires = [
        "bidict>=0.22.1",
        "pydantic>=2",
        "python-dateutil>=2.8.2",
        "ujson>=5.7.0",
    ]
    extras_require = {
        "test": [
            "pytest>=7.4.0",
        ],
    }

    setup(name="hitbtc-connector",
          version=version,
          description="HitBTC exchange connector objects",
          license="Apache 2.0",
          packages=packages,
          package_data=package_data,
          install_requires=install_requires,
          extras_require=extras_require,
          python_requires=">=3.8",
          )


if __name__ == "__main__":
    main()

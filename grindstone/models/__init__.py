"""Models of the version manifest, version data, arguments, rules, libraries and assets."""
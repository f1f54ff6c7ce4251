'''
Dev-Docs Collector

Collects developer-facing release notes ("dev docs") for a given release label from
pull requests and issues hosted on GitHub.

Authors of a pull request describe changes relevant for plugin-/API-consumers below a
`# Dev Docs` heading in the pull request's description. Pull requests (or issues) are
selected by carrying both the dev-docs label (`release_note:dev_docs` by default) and the
release label (e.g. `v7.10.0`) the document is compiled for.

Pull requests that also carry a release label of an earlier release are considered to have
been published already (with the earlier release's document) and are thus omitted.

Pull requests that carry the dev-docs label, but lack a `Dev Docs` section are reported as
"broken", so that authors can be asked to fix them.
'''

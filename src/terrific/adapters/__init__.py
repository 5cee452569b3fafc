"""Provider adapter layer — one connector per upstream capability.

Built-in adapters (registry name → class):
  - wars, explainers: ContentSearchAdapter (Guardian /search, two profiles)
  - wars_article: ContentDetailAdapter (Guardian single item)
  - memes: ListingAdapter (Reddit combined hot listing)
  - sports: NewsWireAdapter (NewsAPI /everything)
  - youtube: VideoSearchAdapter (YouTube Data API search.list)

Every adapter subclasses ``ProviderAdapter`` and maps its provider's raw
schema to the canonical models in ``terrific.models``.
"""

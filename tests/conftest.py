"""Shared schema sources for the test suite."""

import pytest

POST_SCHEMA = """\
import { defineField, defineType } from 'sanity'

export default defineType({
  name: 'post',
  title: 'Post',
  type: 'document',
  fields: [
    defineField({
      name: 'title',
      title: 'Title',
      type: 'string',
      validation: (Rule) => Rule.required(),
    }),
    defineField({
      name: 'slug',
      title: 'Slug',
      type: 'slug',
      options: {
        source: 'title',
        maxLength: 96,
      },
    }),
    defineField({
      name: 'gallery',
      title: 'Gallery',
      type: 'array',
      of: [
        {
          type: 'object',
          fields: [
            { name: 'caption', type: 'string' },
          ],
        },
      ],
    }),
  ],
})
"""

SLIDESHOW_SCHEMA = """\
export default defineType({
  name: "slideshow",
  type: "document",
  fields: [
    defineField({
      name: "heading",
      type: "string",
    }),
    defineField({
      name: "slides",
      type: "array",
      validation: (Rule) => Rule.min(1),
      of: [
        defineArrayMember({
          type: "object",
          name: "slide",
          fields: [
            {
              name: "hero",
              type: "image",
              options: { hotspot: true },
              fields: [
                { name: "alt", type: "string", title: "Alternative text" },
              ],
            },
            { name: "caption", type: "string", validation: (Rule) => Rule.max(120) },
            { name: "caption", type: "text" },
          ],
        }),
      ],
    }),
    defineField({
      name: "tags",
      type: "array",
      of: [{ type: "string" }],
    }),
  ],
})
"""


@pytest.fixture
def post_schema():
    """A post type with a slug and an array of objects."""
    return POST_SCHEMA


@pytest.fixture
def slideshow_schema():
    """A type with an image array, a duplicate nested field and a scalar array."""
    return SLIDESHOW_SCHEMA

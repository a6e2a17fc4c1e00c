"""
Tests for the before/after gallery view.
"""
from django.test import Client, TestCase
from django.urls import reverse


class GalleryViewTests(TestCase):
    def setUp(self):
        self.client = Client()
        self.url = reverse('gallery')

    def test_gallery_lists_every_case(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, 'pages/gallery.html')
        self.assertEqual(response.context['results_count'], 6)
        self.assertEqual(response.context['selected_type'], '')

    def test_filter_by_repair_type(self):
        response = self.client.get(self.url, {'type': 'revision_complete'})
        self.assertEqual([c.id for c in response.context['cases']], ['2', '6'])
        self.assertEqual(response.context['selected_type'], 'revision_complete')

    def test_unknown_type_shows_everything(self):
        response = self.client.get(self.url, {'type': 'teleportation'})
        self.assertEqual(response.context['results_count'], 6)
        self.assertEqual(response.context['selected_type'], '')

    def test_repair_type_counts(self):
        response = self.client.get(self.url)
        counts = {t['value']: t['count'] for t in response.context['repair_types']}
        self.assertEqual(counts['revision_complete'], 2)
        self.assertEqual(sum(counts.values()), 6)
        self.assertContains(response, 'Avant')
        self.assertContains(response, 'Après')

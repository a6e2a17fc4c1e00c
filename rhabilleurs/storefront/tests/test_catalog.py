"""
Unit tests for catalog views (catalog.py).

Tests:
- home: Accueil avec montres et réalisations mises en avant
- boutique: Page boutique avec filtres
- boutique_filter: Rafraîchissement AJAX
"""
import json

from django.test import Client, TestCase, override_settings
from django.urls import reverse


class HomeViewTests(TestCase):
    def setUp(self):
        self.client = Client()
        self.url = reverse('home')

    def test_home_page_loads(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, 'pages/index.html')

    def test_home_page_shows_featured_items(self):
        response = self.client.get(self.url)
        self.assertEqual(len(response.context['featured_watches']), 4)
        self.assertEqual(len(response.context['featured_gallery']), 3)
        self.assertContains(response, 'Speedmaster Professional')

    @override_settings(HOME_FEATURED_WATCHES=2, HOME_FEATURED_GALLERY=1)
    def test_featured_limits_come_from_settings(self):
        response = self.client.get(self.url)
        self.assertEqual([w.id for w in response.context['featured_watches']], ['1', '2'])
        self.assertEqual(len(response.context['featured_gallery']), 1)

    def test_navigation_marks_home_active(self):
        response = self.client.get(self.url)
        active = [item['label'] for item in response.context['nav_items'] if item['active']]
        self.assertEqual(active, ['Accueil'])

    def test_footer_shows_workshop_contact(self):
        response = self.client.get(self.url)
        self.assertContains(response, 'contact@lesrhabilleurs.ch')

    def test_post_not_allowed(self):
        response = self.client.post(self.url)
        self.assertEqual(response.status_code, 405)


class BoutiqueViewTests(TestCase):
    def setUp(self):
        self.client = Client()
        self.url = reverse('boutique')

    def test_boutique_lists_every_watch_newest_first(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, 'pages/catalog.html')
        self.assertEqual([w.id for w in response.context['watches']], ['5', '6', '3', '2', '4', '1'])
        self.assertEqual(response.context['results_count'], 6)
        self.assertFalse(response.context['has_active_filters'])

    def test_filter_by_brand_and_sort(self):
        response = self.client.get(self.url, {'brand': ['Omega', 'Rolex'], 'sort': 'price_desc'})
        self.assertEqual([w.id for w in response.context['watches']], ['2', '1'])
        self.assertTrue(response.context['has_active_filters'])

    def test_search(self):
        response = self.client.get(self.url, {'q': 'reverso'})
        self.assertEqual([w.brand for w in response.context['watches']], ['Jaeger-LeCoultre'])

    def test_price_range(self):
        response = self.client.get(self.url, {'min_price': '7000', 'max_price': '10000'})
        self.assertEqual([w.id for w in response.context['watches']], ['6', '2', '1'])

    def test_malformed_bound_is_ignored_with_notice(self):
        response = self.client.get(self.url, {'min_price': 'abc'})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context['results_count'], 6)
        self.assertEqual(response.context['ignored_bounds'], ['prix minimum'])
        self.assertContains(response, 'Valeur ignorée pour le prix minimum')
        self.assertTrue(response.context['has_active_filters'])
        self.assertContains(response, 'Réinitialiser')

    def test_null_character_bound_keeps_brand_filter(self):
        response = self.client.get(self.url, {'brand': 'Omega', 'min_price': '\x00'})
        self.assertEqual(response.status_code, 200)
        self.assertEqual([w.id for w in response.context['watches']], ['1'])
        self.assertEqual(response.context['ignored_bounds'], ['prix minimum'])

    def test_search_alone_offers_reset(self):
        response = self.client.get(self.url, {'q': 'omega'})
        self.assertTrue(response.context['has_active_filters'])
        self.assertContains(response, 'Réinitialiser')

    def test_no_result_shows_empty_state(self):
        response = self.client.get(self.url, {'q': 'seiko'})
        self.assertEqual(response.context['results_count'], 0)
        self.assertContains(response, 'Aucune montre ne correspond')

    def test_navigation_marks_boutique_active(self):
        response = self.client.get(self.url)
        active = [item['label'] for item in response.context['nav_items'] if item['active']]
        self.assertEqual(active, ['Boutique'])


class BoutiqueFilterAjaxTests(TestCase):
    def setUp(self):
        self.client = Client()
        self.url = reverse('boutique_filter')

    def test_returns_json_fragment(self):
        response = self.client.get(self.url, {'movement': 'mecanique'})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response['Content-Type'], 'application/json')

        data = json.loads(response.content)
        self.assertEqual(data['results_count'], 2)
        self.assertTrue(data['has_active_filters'])
        self.assertEqual(data['query'], 'movement=mecanique')
        self.assertIn('Reverso Classic', data['html'])
        self.assertIn('Calatrava 5196J', data['html'])
        self.assertNotIn('Datejust', data['html'])

    def test_reports_ignored_bounds(self):
        response = self.client.get(self.url, {'max_price': 'NaN'})
        data = json.loads(response.content)
        self.assertEqual(data['ignored_bounds'], ['prix maximum'])
        self.assertTrue(data['has_active_filters'])
        self.assertEqual(data['results_count'], 6)
        self.assertEqual(data['query'], '')

    def test_filter_url_is_not_a_watch_id(self):
        # /boutique/filtre/ must not be captured by the detail route
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 200)
        self.assertIn('html', json.loads(response.content))


class RobotsTxtTests(TestCase):
    def test_robots_txt(self):
        response = self.client.get(reverse('robots_txt'))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response['Content-Type'], 'text/plain')
        self.assertContains(response, 'User-agent: *')

"""
Static inventory of the workshop: watches for sale and restoration showcases.

The site has no database; edit this module to change what the boutique and
the gallery display.
"""
from .records import GalleryCase, WatchListing

WATCHES = (
    WatchListing(
        id='1',
        brand='Omega',
        model='Speedmaster Professional',
        year=1969,
        movement='automatique',
        condition='bon',
        description=(
            "La légendaire Moonwatch, référence incontournable pour tout collectionneur. "
            "Cette Speedmaster Professional de 1969 a été entièrement révisée dans notre atelier. "
            "Le cadran noir mat d'origine présente une patine sublime, les index et aiguilles "
            "luminova ont développé une teinte crème caractéristique de l'époque. Ref. 145.022-68"
        ),
        price=8300,
        photos=(
            'https://img.ricardostatic.ch/images/dc7b27e1-9bc3-4a1c-8a54-f4bfa74d92a7/t_1000x750/'
            '1969-omega-speedmaster-pre-moon-145022-68-eoa-service',
        ),
        is_rare=True,
        revision_details=(
            "Révision complète du calibre 861, remplacement des joints, polissage du boîtier, "
            "étanchéité testée à 50m."
        ),
        warranty_months=12,
    ),
    WatchListing(
        id='2',
        brand='Rolex',
        model='Datejust 36',
        year=2015,
        movement='automatique',
        condition='excellent',
        description=(
            "Rolex Datejust 36mm en acier et or jaune 18 carats. Cadran champagne avec index "
            "bâtons, bracelet Jubilee d'origine. Cette montre incarne l'élégance intemporelle "
            "de la maison Rolex. Ref. 116200"
        ),
        price=9200,
        photos=('https://www.markworthingtonjewellers.co.uk/images/super/116200_silver_baton_2.jpg',),
        is_rare=False,
        revision_details=(
            "Service complet Rolex, calibre 3135 révisé, étanchéité 100m vérifiée, "
            "polissage professionnel."
        ),
        warranty_months=24,
    ),
    WatchListing(
        id='3',
        brand='Jaeger-LeCoultre',
        model='Reverso Classic',
        year=2018,
        movement='mecanique',
        condition='tres_bon',
        description=(
            "L'iconique Reverso avec son boîtier réversible Art Déco. Cadran argenté guilloché, "
            "chiffres arabes appliqués. Une pièce d'exception qui traverse les décennies avec élégance."
        ),
        price=6800,
        photos=(
            'https://images.hbjo-online.com/webp/sites/masson/uploads/images/'
            '678a30b76aef0678a30036e55c_img4857.png',
        ),
        is_rare=False,
        revision_details=(
            "Révision complète du mouvement manuel, nettoyage ultrason du boîtier, "
            "nouveau bracelet cuir."
        ),
        warranty_months=12,
    ),
    WatchListing(
        id='4',
        brand='Patek Philippe',
        model='Calatrava 5196J',
        year=2012,
        movement='mecanique',
        condition='excellent',
        description=(
            "La quintessence de l'élégance horlogère. Cette Calatrava 5196J en or rose 18 carats "
            "représente la perfection du style classique. Cadran blanc avec aiguilles feuille."
        ),
        price=19800,
        photos=('https://img.chrono24.com/images/uhren/44009378-3fzcx3bt2ua2pff52loh5yku-ExtraLarge.jpg',),
        is_rare=True,
        revision_details="Service complet Patek Philippe, calibre 215 PS révisé, nouveau bracelet alligator.",
        warranty_months=24,
    ),
    WatchListing(
        id='5',
        brand='Tudor',
        model='Black Bay 58',
        year=2020,
        movement='automatique',
        condition='excellent',
        description=(
            "La Black Bay 58 revisite les codes vintage des montres de plongée Tudor des années 50. "
            "Boîtier 39mm parfaitement proportionné, lunette rotative unidirectionnelle, étanche à 200m."
        ),
        price=3800,
        photos=('https://img.chrono24.com/images/uhren/43351161-6q7nw1ho0nu4ga9b22nzftjr-ExtraLarge.jpg',),
        is_rare=False,
        revision_details="Contrôle complet, étanchéité vérifiée, bracelet acier ajusté.",
        warranty_months=12,
    ),
    WatchListing(
        id='6',
        brand='IWC',
        model='Portugieser Chronograph',
        year=2019,
        movement='automatique',
        condition='tres_bon',
        description=(
            "Le Portugieser Chronograph 41mm combine élégance et sportivité. Cadran bleu profond, "
            "compteurs contrastés, bracelet alligator noir."
        ),
        price=7200,
        photos=(
            'https://chpremier.com/cdn/shop/products/'
            'iwc-schaffhausen-portugieser-chronograph-iw371606-147884_1024x1024.jpg?v=1620868443',
        ),
        is_rare=False,
        revision_details="Service complet du calibre 69355, verre saphir vérifié, étanchéité 30m.",
        warranty_months=24,
    ),
)


GALLERY_CASES = (
    GalleryCase(
        id='1',
        title='Restauration cadran vintage',
        watch_brand='Omega',
        watch_model='Constellation',
        description=(
            "Restauration complète d'un cadran Omega Constellation des années 60. Nettoyage délicat "
            "des index dorés, traitement des taches d'oxydation, et remise en état des aiguilles dauphines."
        ),
        photo_before='https://cdn.shopify.com/s/files/1/0573/8630/3539/files/IMG_7214_1024x1024.jpg?v=1666862813',
        photo_after='https://cdn.shopify.com/s/files/1/0573/8630/3539/files/IMG_7200_1024x1024.jpg?v=1666862790',
        repair_type='restauration',
    ),
    GalleryCase(
        id='2',
        title='Révision mouvement chronographe',
        watch_brand='Breitling',
        watch_model='Navitimer',
        description=(
            "Révision complète du calibre Valjoux 7750. Démontage intégral, nettoyage ultrason, "
            "remplacement des pièces d'usure, réglage sur 6 positions, test d'étanchéité."
        ),
        photo_before=(
            'https://ae01.alicdn.com/kf/S0346cd7b439f458a975ca208faf05027Y/'
            'ETA-7750-Movements-High-Accuracy-Clone-Modified-Mechanical-Movement-Replacement-Mechanism-3-6-9-Chrono.jpg'
        ),
        photo_after='https://i.ebayimg.com/images/g/chQAAOSwx4FmzIJ2/s-l1200.jpg',
        repair_type='revision_complete',
    ),
    GalleryCase(
        id='3',
        title='Polissage boîtier acier',
        watch_brand='Rolex',
        watch_model='Submariner',
        description=(
            "Polissage professionnel d'un boîtier Submariner avec respect des angles d'origine. "
            "Élimination des rayures tout en préservant les proportions du boîtier."
        ),
        photo_before='https://www.clockmaker.com.au/rolex/polish_rolex_2.jpg',
        photo_after='https://img.chrono24.com/images/uhren/40080099-euhsvgrx2qr6zzxlqbssepzj-ExtraLarge.jpg',
        repair_type='polissage',
    ),
    GalleryCase(
        id='4',
        title='Réparation mécanisme remontoir',
        watch_brand='Patek Philippe',
        watch_model='Calatrava',
        description=(
            "Remplacement de la tige de remontoir et de la couronne d'origine. Travail minutieux "
            "pour conserver l'authenticité de cette pièce exceptionnelle."
        ),
        photo_before='https://i.ebayimg.com/images/g/yG4AAOSwWGxmRH-p/s-l400.jpg',
        photo_after='https://patek-res.cloudinary.com/dfsmedia/0906caea301d42b3b8bd23bd656d1711/206436-51882',
        repair_type='reparation',
    ),
    GalleryCase(
        id='5',
        title='Test et remise en étanchéité',
        watch_brand='Tudor',
        watch_model='Pelagos',
        description=(
            "Remplacement de tous les joints, test d'étanchéité sous pression à 500m. "
            "La montre retrouve ses performances de plongée d'origine."
        ),
        photo_before=(
            'https://hodinkee.imgix.net/uploads/article/hero_image/689/Test.jpg'
            '?ixlib=rails-1.1.0&fm=jpg&q=55&auto=format&usm=12'
        ),
        photo_after='https://img.chrono24.com/images/uhren/6ymss7akp9jr-lxax5iqnudg8um63o5y0pvgq-ExtraLarge.jpg',
        repair_type='etancheite',
    ),
    GalleryCase(
        id='6',
        title='Révision complète vintage',
        watch_brand='Longines',
        watch_model='Conquest Heritage',
        description=(
            "Révision complète d'une Longines vintage incluant le mouvement, le polissage du boîtier "
            "et le remplacement du verre. Pièce remise à neuf dans le respect de son histoire."
        ),
        photo_before=(
            'https://static.wixstatic.com/media/dea6ce_a7f8090ead3d40d987854e13458c0465~mv2.jpg/'
            'v1/fit/w_500,h_500,q_90/file.jpg'
        ),
        photo_after=(
            'https://api.ecom.longines.com/media/catalog/product/9/0/'
            '9004-9888328-bottom-gallery-4db95e.jpg?&w=2560'
        ),
        repair_type='revision_complete',
    ),
)
